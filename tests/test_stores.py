"""
Record Store Tests

Tests for the record store backends:
- InMemoryRecordStore lookups, filters and creation
- SQLRecordStore against SQLite
- Failure reporting as RecordStoreError
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from library_graph.models import Author, Book
from library_graph.schemas import AuthorCreate, AuthorRecord, BookCreate, BookRecord
from library_graph.stores import (
    InMemoryRecordStore,
    RecordStoreError,
    SQLRecordStore,
)
from library_graph.stores import seed

# =============================================================================
# In-Memory Store
# =============================================================================


@pytest.fixture
def memory_books() -> InMemoryRecordStore[BookRecord]:
    return InMemoryRecordStore(BookRecord, seed.BOOKS)


class TestInMemoryRecordStore:
    """Tests for the list-backed store."""

    def test_seed_records_loaded(self, memory_books):
        assert len(memory_books) == len(seed.BOOKS)

    @pytest.mark.asyncio
    async def test_find_by_id(self, memory_books):
        record = await memory_books.find_by_id("2")

        assert record == BookRecord(
            id="2", name="The Final Empire", genre="Fantasy", author_id="2"
        )

    @pytest.mark.asyncio
    async def test_find_by_id_miss(self, memory_books):
        assert await memory_books.find_by_id("99") is None

    @pytest.mark.asyncio
    async def test_find_without_filters_returns_everything(self, memory_books):
        records = await memory_books.find()

        assert [r.id for r in records] == ["1", "2", "3", "4", "5", "6"]

    @pytest.mark.asyncio
    async def test_find_with_filter(self, memory_books):
        records = await memory_books.find(author_id="3")

        assert {r.name for r in records} == {
            "The Long Earth",
            "The Colour of Magic",
            "The Light Fantastic",
        }

    @pytest.mark.asyncio
    async def test_find_with_no_matches(self, memory_books):
        assert await memory_books.find(author_id="missing") == []

    @pytest.mark.asyncio
    async def test_find_unknown_filter(self, memory_books):
        with pytest.raises(RecordStoreError, match="title"):
            await memory_books.find(title="Dune")

    @pytest.mark.asyncio
    async def test_create_assigns_id(self):
        store = InMemoryRecordStore(AuthorRecord)

        record = await store.create(AuthorCreate(name="Ada", age=30))

        assert len(record.id) == 24
        assert record.name == "Ada"
        assert record.age == 30
        assert await store.find_by_id(record.id) == record

    @pytest.mark.asyncio
    async def test_created_ids_are_unique(self):
        store = InMemoryRecordStore(AuthorRecord)

        first = await store.create(AuthorCreate(name="Ada", age=30))
        second = await store.create(AuthorCreate(name="Ada", age=30))

        assert first.id != second.id
        assert len(await store.find(name="Ada")) == 2

    def test_missing_fields_default_to_none(self):
        store = InMemoryRecordStore(BookRecord, [{"id": "7", "name": "Untitled"}])

        record = store._records[0]

        assert record.genre is None
        assert record.author_id is None


# =============================================================================
# SQL Store
# =============================================================================


@pytest.fixture
def sql_authors(db_session: Session) -> SQLRecordStore[AuthorRecord]:
    return SQLRecordStore(db_session, Author, AuthorRecord)


@pytest.fixture
def sql_books(db_session: Session) -> SQLRecordStore[BookRecord]:
    return SQLRecordStore(db_session, Book, BookRecord)


class TestSQLRecordStore:
    """Tests for the SQLAlchemy-backed store."""

    @pytest.mark.asyncio
    async def test_create_and_find_by_id(self, sql_authors):
        created = await sql_authors.create(AuthorCreate(name="Ada", age=30))

        found = await sql_authors.find_by_id(created.id)

        assert isinstance(found, AuthorRecord)
        assert found == AuthorRecord(id=created.id, name="Ada", age=30)

    @pytest.mark.asyncio
    async def test_find_by_id_miss(self, sql_authors):
        assert await sql_authors.find_by_id("does-not-exist") is None

    @pytest.mark.asyncio
    async def test_find_empty_table(self, sql_books):
        assert await sql_books.find() == []

    @pytest.mark.asyncio
    async def test_find_by_author(self, sql_books):
        await sql_books.create(BookCreate(name="A", genre="Fantasy", author_id="a1"))
        await sql_books.create(BookCreate(name="B", genre="Fantasy", author_id="a2"))
        await sql_books.create(BookCreate(name="C", genre="Sci-Fi", author_id="a1"))

        records = await sql_books.find(author_id="a1")

        assert {r.name for r in records} == {"A", "C"}

    @pytest.mark.asyncio
    async def test_find_unknown_filter(self, sql_books):
        with pytest.raises(RecordStoreError):
            await sql_books.find(title="Dune")

    @pytest.mark.asyncio
    async def test_create_failure_rolls_back(self):
        db = MagicMock(spec=Session)
        db.commit.side_effect = SQLAlchemyError("disk full")
        store = SQLRecordStore(db, Author, AuthorRecord)

        with pytest.raises(RecordStoreError, match="Could not create Author"):
            await store.create(AuthorCreate(name="Ada", age=30))

        db.rollback.assert_called_once()

    @pytest.mark.asyncio
    async def test_lookup_failure(self):
        db = MagicMock(spec=Session)
        db.get.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        store = SQLRecordStore(db, Book, BookRecord)

        with pytest.raises(RecordStoreError, match="Could not load Book"):
            await store.find_by_id("1")
