"""Repository interface and its SQLAlchemy implementation.

Services depend on the ``Repository`` protocol only. It exposes five
primitives per entity and hands back plain records, never ORM instances.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from stable_api.errors import DomainError, NotFoundError

RecordT = TypeVar("RecordT")
RecordT_co = TypeVar("RecordT_co", covariant=True)


class Repository(Protocol[RecordT_co]):
    def insert(self, **values: Any) -> RecordT_co: ...

    def find_unique(self, **key: Any) -> RecordT_co | None: ...

    def find_many(self, **criteria: Any) -> list[RecordT_co]: ...

    def update(self, record_id: int, **changes: Any) -> RecordT_co: ...

    def delete(self, record_id: int) -> None: ...


class SqlAlchemyRepository(ABC, Generic[RecordT]):
    """Generic data access over one ORM model. Pure data access - no business logic.

    Every write commits its own transaction. Subclasses set ``model`` and
    ``entity_name`` and implement ``_to_record``.
    """

    model: Any = None
    entity_name: str = "Record"

    def __init__(self, db: Session):
        self.db = db

    @abstractmethod
    def _to_record(self, row: Any) -> RecordT:
        """Convert an ORM row into the plain record handed to services."""

    def _translate_integrity_error(self, exc: IntegrityError) -> DomainError | None:
        """Map a constraint violation to a domain error; None lets it propagate."""
        return None

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            translated = self._translate_integrity_error(exc)
            if translated is None:
                raise
            raise translated from exc

    def _get_row(self, record_id: int) -> Any:
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def _get_row_or_raise(self, record_id: int) -> Any:
        row = self._get_row(record_id)
        if row is None:
            raise NotFoundError(f"{self.entity_name} with ID {record_id} not found")
        return row

    def insert(self, **values: Any) -> RecordT:
        """Insert a new row and return it with its assigned id."""
        row = self.model(**values)
        self.db.add(row)
        self._commit()
        self.db.refresh(row)
        return self._to_record(row)

    def find_unique(self, **key: Any) -> RecordT | None:
        """Get the row matching a unique key (e.g. ``id=1`` or ``email=...``)."""
        row = self.db.query(self.model).filter_by(**key).first()
        return self._to_record(row) if row is not None else None

    def find_many(self, **criteria: Any) -> list[RecordT]:
        """Get all rows whose columns equal every given criterion, ordered by id."""
        query = self.db.query(self.model)
        if criteria:
            query = query.filter_by(**criteria)
        return [self._to_record(row) for row in query.order_by(self.model.id).all()]

    def update(self, record_id: int, **changes: Any) -> RecordT:
        """Overwrite the given columns. Columns not passed are left untouched."""
        row = self._get_row_or_raise(record_id)
        for column, value in changes.items():
            setattr(row, column, value)
        self._commit()
        self.db.refresh(row)
        return self._to_record(row)

    def delete(self, record_id: int) -> None:
        row = self._get_row_or_raise(record_id)
        self.db.delete(row)
        self._commit()
