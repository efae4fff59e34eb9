"""
Record Store Interface

A record store is the persistence collaborator behind the GraphQL layer.
There is one store per entity type. The GraphQL resolvers only ever talk
to this interface, so the backend (in-memory list or SQL database) is
chosen at request wiring time and never named in the schema code.

All methods are coroutines. Backends that do blocking I/O are still
called with `await`, which keeps the resolvers identical across backends.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from library_graph.schemas import AuthorRecord, BookRecord

R = TypeVar("R", bound=BaseModel)


class RecordStoreError(Exception):
    """Raised when a record store cannot complete a lookup or write."""

    pass


class RecordStore(ABC, Generic[R]):
    """
    Persistence operations for one record type.

    Implementations must:
    - return None from find_by_id on a miss (never raise for a miss)
    - return a list (possibly empty) from find
    - assign the identifier in create
    - raise RecordStoreError for any backend failure
    """

    record_type: type[R]

    @abstractmethod
    async def find_by_id(self, id: str) -> R | None:
        """Return the record with this identifier, or None."""

    @abstractmethod
    async def find(self, **filters: Any) -> list[R]:
        """
        Return every record whose fields equal the given filters.

        With no filters, every record in the store is returned.
        """

    @abstractmethod
    async def create(self, fields: BaseModel) -> R:
        """Persist a new record built from `fields` and return it."""

    def _check_filters(self, filters: dict[str, Any]) -> None:
        unknown = set(filters) - set(self.record_type.model_fields)
        if unknown:
            raise RecordStoreError(
                f"Unknown {self.record_type.__name__} filter field(s): "
                f"{', '.join(sorted(unknown))}"
            )


@dataclass(frozen=True)
class RecordStores:
    """The pair of stores a request works against."""

    books: RecordStore[BookRecord]
    authors: RecordStore[AuthorRecord]
