"""
pytest Fixtures for Library Graph Tests

Shared fixtures used across all test files.

Every GraphQL test that uses the `client` fixture runs twice: once
against empty in-memory record stores and once against SQL record
stores on an in-memory SQLite database. The stores are injected by
overriding the get_record_stores dependency, so the schema code under
test is the same in both runs.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["RECORD_STORE"] = "memory"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import asyncio
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from library_graph.database import Base
from library_graph.dependencies import (
    get_record_stores,
    reset_memory_stores,
    sql_record_stores,
)
from library_graph.main import app
from library_graph.schemas import AuthorCreate, AuthorRecord, BookCreate, BookRecord
from library_graph.stores import InMemoryRecordStore, RecordStores

# Identifier that no record store will ever assign
MISSING_ID = "ffffffffffffffffffffffff"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole session;
    without it the in-memory database would vanish between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    import library_graph.models  # noqa: F401

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session joins an outer transaction that is rolled back after the
    test, so commits made by the record store never leak between tests.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


# =============================================================================
# RECORD STORE FIXTURES
# =============================================================================
@pytest.fixture(params=["memory", "database"])
def backend(request) -> str:
    """Name of the record store backend under test."""
    return request.param


@pytest.fixture
def stores(backend: str, db_session: Session) -> RecordStores:
    """Empty record stores for the backend under test."""
    if backend == "memory":
        return RecordStores(
            books=InMemoryRecordStore(BookRecord),
            authors=InMemoryRecordStore(AuthorRecord),
        )
    return sql_record_stores(db_session)


@pytest.fixture(scope="function")
def client(stores: RecordStores) -> Generator[TestClient, None, None]:
    """
    Create a test client wired to the `stores` fixture.

    get_record_stores is overridden, so the GraphQL context receives the
    test stores instead of the configured backend.
    """
    app.dependency_overrides[get_record_stores] = lambda: stores

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def default_client() -> Generator[TestClient, None, None]:
    """Test client using the app's own wiring (seeded in-memory stores)."""
    reset_memory_stores()

    with TestClient(app) as test_client:
        yield test_client

    reset_memory_stores()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
# Records are created through the stores themselves so that every
# backend assigns its own identifiers.


@pytest.fixture
def sample_author(stores: RecordStores) -> AuthorRecord:
    """Create a sample author."""
    return asyncio.run(
        stores.authors.create(AuthorCreate(name="Patrick Rothfuss", age=44))
    )


@pytest.fixture
def second_author(stores: RecordStores) -> AuthorRecord:
    """Create a second author with no books."""
    return asyncio.run(
        stores.authors.create(AuthorCreate(name="Terry Pratchett", age=66))
    )


@pytest.fixture
def sample_book(stores: RecordStores, sample_author: AuthorRecord) -> BookRecord:
    """Create a book written by sample_author."""
    return asyncio.run(
        stores.books.create(
            BookCreate(
                name="Name of the Wind",
                genre="Fantasy",
                author_id=sample_author.id,
            )
        )
    )


@pytest.fixture
def multiple_books(
    stores: RecordStores,
    sample_author: AuthorRecord,
    second_author: AuthorRecord,
) -> list[BookRecord]:
    """Create two books for sample_author and one for second_author."""
    books_data = [
        ("Name of the Wind", "Fantasy", sample_author.id),
        ("The Wise Man's Fear", "Fantasy", sample_author.id),
        ("The Colour of Magic", "Fantasy", second_author.id),
    ]
    return [
        asyncio.run(
            stores.books.create(BookCreate(name=name, genre=genre, author_id=author_id))
        )
        for name, genre, author_id in books_data
    ]


@pytest.fixture
def orphan_book(stores: RecordStores) -> BookRecord:
    """Create a book whose author_id matches no author."""
    return asyncio.run(
        stores.books.create(
            BookCreate(name="Unattributed", genre="Mystery", author_id=MISSING_ID)
        )
    )
