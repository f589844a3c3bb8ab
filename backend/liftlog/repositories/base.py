# liftlog/repositories/base.py
from __future__ import annotations
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from liftlog.errors import PersistenceError

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style.

    Every write commits on its own. Database errors roll the session back and
    surface as PersistenceError so callers never see driver exceptions.
    """
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: str) -> Optional[T]:
        try:
            return self.db.get(self.model, entity_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"get {self.model.__tablename__}", entity_id) from e

    def delete(self, entity_id: str) -> bool:
        """Delete by id. Returns False when the row did not exist."""
        try:
            row = self.db.get(self.model, entity_id)
            if row is None:
                return False
            self.db.delete(row)
            self.db.commit()
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"delete {self.model.__tablename__}", entity_id) from e

    def upsert(self, entity_id: str, values: dict[str, Any], *, parent: tuple | None = None) -> T:
        """Insert or overwrite the row keyed by ``entity_id``.

        ``parent`` is ``(column, value)``; new rows get the next position under
        that parent so lists come back in insertion order.
        """
        try:
            row = self.db.get(self.model, entity_id)
            if row is None:
                row = self.model(id=entity_id, **values)
                if parent is not None:
                    column, value = parent
                    max_pos = self.db.execute(
                        select(func.max(self.model.position)).where(column == value)
                    ).scalar_one()
                    row.position = (max_pos or 0) + 1
                self.db.add(row)
            else:
                for key, value in values.items():
                    setattr(row, key, value)
            self.db.commit()
            self.db.refresh(row)
            return row
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"save {self.model.__tablename__}", entity_id) from e

    def all(self, stmt) -> list[T]:
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"query {self.model.__tablename__}") from e
