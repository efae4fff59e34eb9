"""
Record Stores Package

- base.py: RecordStore interface, RecordStores pair, RecordStoreError
- memory.py: list-backed store seeded with mock records
- sql.py: SQLAlchemy-backed store
- seed.py: the mock authors and books
"""

from library_graph.stores.base import RecordStore, RecordStoreError, RecordStores
from library_graph.stores.memory import InMemoryRecordStore
from library_graph.stores.sql import SQLRecordStore

__all__ = [
    "RecordStore",
    "RecordStoreError",
    "RecordStores",
    "InMemoryRecordStore",
    "SQLRecordStore",
]
