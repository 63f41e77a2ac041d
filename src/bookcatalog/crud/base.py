"""
Shared plumbing for the catalog repositories.

Every public repository method runs in its own `session_scope`: one
session, one unit of work, committed on success and always closed.
Rows are turned into records before the session closes, so callers never
hold live ORM objects.
"""

import logging
from typing import Iterable, List, Optional, Type

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from ..db.session import Base, SessionLocal, session_scope
from ..schemas.catalog import EntitySchema

logger = logging.getLogger(__name__)


class BaseRepository:
    model: Type[Base]
    schema: Type[EntitySchema]

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self._session_factory = session_factory or SessionLocal

    def _session(self):
        return session_scope(self._session_factory)

    def _scalar_fields(self) -> List[str]:
        return [
            name for name in self.schema.model_fields
            if name != "id" and name not in self.schema.RELATIONS
        ]

    def _to_records(self, rows: Iterable[Base]) -> List[EntitySchema]:
        return [self.schema.from_row(row) for row in rows]

    def _list(self, *criteria, options: tuple = ()) -> List[EntitySchema]:
        stmt = select(self.model).options(*options).where(*criteria).order_by(self.model.id)
        with self._session() as db:
            return self._to_records(db.execute(stmt).scalars().all())

    def _search(self, column, text: str) -> List[EntitySchema]:
        """Case-insensitive substring match; wildcard characters in `text` match literally."""
        return self._list(column.icontains(text, autoescape=True))

    def _get_by_id(self, record_id: int, options: tuple = ()) -> Optional[EntitySchema]:
        stmt = select(self.model).options(*options).where(self.model.id == record_id)
        with self._session() as db:
            row = db.execute(stmt).scalars().first()
            return self.schema.from_row(row) if row is not None else None

    def _insert(self, db: Session, record: EntitySchema) -> Base:
        row = self.model(**record.model_dump(include=set(self._scalar_fields())))
        db.add(row)
        return row

    def _add(self, record: EntitySchema) -> EntitySchema:
        with self._session() as db:
            row = self._insert(db, record)
            db.flush()
            logger.info(f"{self.model.__name__} {row.id} added.")
            return self.schema.from_row(row)

    def _overwrite(self, record: EntitySchema, fields: Optional[List[str]] = None) -> bool:
        with self._session() as db:
            row = db.get(self.model, record.id) if record.id is not None else None
            if row is None:
                logger.warning(f"Attempted edit of non-existent {self.model.__name__} ID: {record.id}")
                return False
            for name in fields or self._scalar_fields():
                setattr(row, name, getattr(record, name))
            logger.info(f"{self.model.__name__} {record.id} updated.")
            return True

    def _delete(self, record_id: Optional[int]) -> bool:
        with self._session() as db:
            row = db.get(self.model, record_id) if record_id is not None else None
            if row is None:
                logger.warning(f"Attempted delete of non-existent {self.model.__name__} ID: {record_id}")
                return False
            db.delete(row)
            logger.info(f"{self.model.__name__} {record_id} deleted.")
            return True
