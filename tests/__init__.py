"""
Test Suite for Library Graph

Test Organization:
- conftest.py: Shared fixtures (record stores, test database, client, sample data)
- test_graphql.py: Queries, relationships, mutations and errors over /graphql
- test_stores.py: In-memory and SQL record stores
- test_config.py: Settings validation
- test_app.py: Root/health endpoints, store wiring, schema shape

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_graphql.py

    # Run with verbose output
    pytest -v
"""
