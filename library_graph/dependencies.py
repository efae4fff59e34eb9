"""
FastAPI Dependencies Module

Wires the configured record store backend into each request.

The GraphQL context getter depends on get_record_stores(), so tests can
swap the backend with app.dependency_overrides[get_record_stores].
"""

import logging
import threading
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from library_graph.config import get_settings
from library_graph.database import get_db
from library_graph.models import Author, Book
from library_graph.schemas import AuthorRecord, BookRecord
from library_graph.stores import InMemoryRecordStore, RecordStores, SQLRecordStore
from library_graph.stores import seed

logger = logging.getLogger(__name__)

settings = get_settings()

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# In-Memory Stores
# =============================================================================
# Built once per process. get_record_stores() is a sync dependency that
# FastAPI runs in its threadpool, so the first construction is guarded.

_memory_stores: RecordStores | None = None
_memory_stores_lock = threading.Lock()


def get_memory_stores() -> RecordStores:
    """
    Process-wide in-memory stores, seeded with the mock records.

    Shared so that records created by one request are visible to the next.
    """
    global _memory_stores

    if _memory_stores is not None:
        return _memory_stores

    with _memory_stores_lock:
        if _memory_stores is None:
            logger.info("Initialising in-memory record stores")
            _memory_stores = RecordStores(
                books=InMemoryRecordStore(BookRecord, seed.BOOKS),
                authors=InMemoryRecordStore(AuthorRecord, seed.AUTHORS),
            )
        return _memory_stores


def reset_memory_stores() -> None:
    """Drop the in-memory stores; the next request re-seeds them."""
    global _memory_stores

    with _memory_stores_lock:
        _memory_stores = None


def sql_record_stores(db: Session) -> RecordStores:
    """Build database-backed stores bound to one session."""
    return RecordStores(
        books=SQLRecordStore(db, Book, BookRecord),
        authors=SQLRecordStore(db, Author, AuthorRecord),
    )


def get_record_stores(db: DbSession) -> RecordStores:
    """
    Record stores for the current request.

    The session from get_db() is only used by the database backend; for
    the in-memory backend it is closed again without ever connecting.
    """
    if settings.uses_database:
        return sql_record_stores(db)
    return get_memory_stores()


RecordStoresDep = Annotated[RecordStores, Depends(get_record_stores)]
