"""
In-Memory Record Store

Keeps records in a Python list and answers every lookup with a linear
scan. Used by default and in tests; records created through mutations
live as long as the store instance.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from library_graph.models.ids import new_record_id
from library_graph.stores.base import R, RecordStore, RecordStoreError

logger = logging.getLogger(__name__)


class InMemoryRecordStore(RecordStore[R]):
    """
    List-backed record store.

    Args:
        record_type: Pydantic record class (BookRecord or AuthorRecord)
        records: Initial records as mappings; validated into record_type

    Example:
        store = InMemoryRecordStore(AuthorRecord, [{"id": "1", "name": "Ada"}])
        author = await store.find_by_id("1")
    """

    def __init__(
        self,
        record_type: type[R],
        records: Iterable[Mapping[str, Any]] = (),
    ):
        self.record_type = record_type
        self._records: list[R] = [record_type.model_validate(r) for r in records]

    def __len__(self) -> int:
        return len(self._records)

    async def find_by_id(self, id: str) -> R | None:
        for record in self._records:
            if record.id == id:
                return record
        return None

    async def find(self, **filters: Any) -> list[R]:
        self._check_filters(filters)
        return [
            record
            for record in self._records
            if all(getattr(record, key) == value for key, value in filters.items())
        ]

    async def create(self, fields: BaseModel) -> R:
        try:
            record = self.record_type(id=new_record_id(), **fields.model_dump())
        except (TypeError, ValueError) as exc:
            raise RecordStoreError(
                f"Invalid {self.record_type.__name__} fields: {exc}"
            ) from exc

        self._records.append(record)
        logger.info(f"Created {self.record_type.__name__} {record.id}")
        return record
