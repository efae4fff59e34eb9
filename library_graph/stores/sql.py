"""
SQL Record Store

Record store backed by a SQLAlchemy session and one mapped model.
Rows are converted to pydantic records before leaving the store, so
resolvers never hold ORM objects tied to the session.

The session is synchronous; calls block the event loop for the length
of the query, the same trade-off the rest of the app makes by using
sync SQLAlchemy.
"""

import logging
from typing import Any

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from library_graph.database import Base
from library_graph.stores.base import R, RecordStore, RecordStoreError

logger = logging.getLogger(__name__)


class SQLRecordStore(RecordStore[R]):
    """
    Record store for one SQLAlchemy model.

    Args:
        db: Session scoped to the current request
        model: Mapped model class (Book or Author)
        record_type: Pydantic record class returned to callers
    """

    def __init__(self, db: Session, model: type[Base], record_type: type[R]):
        self.db = db
        self.model = model
        self.record_type = record_type

    async def find_by_id(self, id: str) -> R | None:
        try:
            row = self.db.get(self.model, id)
        except SQLAlchemyError as exc:
            logger.error(f"Lookup of {self.model.__name__} {id!r} failed: {exc}")
            raise RecordStoreError(f"Could not load {self.model.__name__}") from exc

        if row is None:
            return None
        return self.record_type.model_validate(row)

    async def find(self, **filters: Any) -> list[R]:
        self._check_filters(filters)
        try:
            stmt = select(self.model).filter_by(**filters)
            rows = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as exc:
            logger.error(f"Query on {self.model.__name__} failed: {exc}")
            raise RecordStoreError(f"Could not query {self.model.__name__}") from exc

        return [self.record_type.model_validate(row) for row in rows]

    async def create(self, fields: BaseModel) -> R:
        row = self.model(**fields.model_dump())
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Insert into {self.model.__tablename__} failed: {exc}")
            raise RecordStoreError(f"Could not create {self.model.__name__}") from exc

        logger.info(f"Created {self.model.__name__} {row.id}")
        return self.record_type.model_validate(row)
