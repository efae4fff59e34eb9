"""
Library Graph Application Package

A GraphQL API over books and their authors.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine and session management
- main.py: FastAPI application factory
- dependencies.py: Record store wiring for requests
- models/: SQLAlchemy ORM models
- schemas/: Pydantic record shapes
- stores/: Record stores (in-memory and database backed)
- graphql/: Strawberry types, queries, mutations and schema
"""

__version__ = "0.1.0"
