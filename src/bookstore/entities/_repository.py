"""Generic data-access layer shared by the catalog entities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select
from sqlmodel.sql.expression import SelectOfScalar

from src.bookstore.entities._base import EntityTable

RowT = TypeVar("RowT", bound=EntityTable)


class RowMissingError(LookupError):
    """The row targeted by a write was no longer in the store."""


@dataclass(frozen=True)
class RepositoryResult:
    """Outcome of a repository write.

    Expected persistence failures are reported here instead of raised, with
    the underlying exception kept as ``cause``.
    """

    success: bool
    cause: Exception | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls) -> RepositoryResult:
        return cls(success=True)

    @classmethod
    def failed(cls, cause: Exception) -> RepositoryResult:
        return cls(success=False, cause=cause)

    @property
    def message(self) -> str:
        if self.cause is None:
            return "no error"
        return f"{type(self.cause).__name__}: {self.cause}"


class Repository(Generic[RowT]):
    """Data-access layer for one table.

    Subclasses set ``model`` and may override ``_select`` to eager-load
    relationships needed by the mapper.
    """

    model: ClassVar[type[EntityTable]]
    immutable_fields: ClassVar[frozenset[str]] = frozenset({"id", "created_at", "updated_at"})

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def _select(self) -> SelectOfScalar[Any]:
        return select(self.model)

    def find_all(self) -> Sequence[RowT]:
        return self._session.exec(self._select()).all()

    def find_by_id(self, item_id: int) -> RowT | None:
        statement = self._select().where(self.model.id == item_id)
        return self._session.exec(statement).first()

    def exists(self, item_id: int) -> bool:
        statement = select(self.model.id).where(self.model.id == item_id)
        return self._session.exec(statement).first() is not None

    def create(self, row: RowT) -> RepositoryResult:
        self._session.add(row)
        result = self._save()
        if result:
            self._session.refresh(row)
        return result

    def update(self, row: RowT) -> RepositoryResult:
        """Copy the mutable columns of ``row`` onto the stored row with the same id."""
        existing = self._session.get(self.model, row.id)
        if existing is None:
            return RepositoryResult.failed(
                RowMissingError(f"{self.model.__name__} {row.id} no longer exists")
            )

        for name in self._mutable_columns():
            setattr(existing, name, getattr(row, name))
        self._session.add(existing)
        return self._save()

    def delete(self, row: RowT) -> RepositoryResult:
        self._session.delete(row)
        return self._save()

    def _mutable_columns(self) -> list[str]:
        return [
            name
            for name in self.model.__table__.columns.keys()
            if name not in self.immutable_fields
        ]

    def _save(self) -> RepositoryResult:
        try:
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            return RepositoryResult.failed(exc)
        return RepositoryResult.ok()
