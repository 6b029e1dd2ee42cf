"""Conversion between persistence rows and transfer models."""

from collections.abc import Iterable
from typing import Generic, TypeVar

from pydantic import BaseModel

from src.bookstore.entities._base import EntityTable

RowT = TypeVar("RowT", bound=EntityTable)
ReadT = TypeVar("ReadT", bound=BaseModel)


class EntityMapper(Generic[RowT, ReadT]):
    """Field-by-field mapping for one entity type.

    Rows become read models through ``from_attributes``; create and update
    payloads become rows by field name. A create payload has no ``id``, so
    the row's identifier stays unset for the store to assign.
    """

    def __init__(self, row_type: type[RowT], read_type: type[ReadT]) -> None:
        self._row_type = row_type
        self._read_type = read_type

    def to_read(self, row: RowT) -> ReadT:
        return self._read_type.model_validate(row, from_attributes=True)

    def to_read_list(self, rows: Iterable[RowT]) -> list[ReadT]:
        return [self.to_read(row) for row in rows]

    def to_row(self, dto: BaseModel) -> RowT:
        values = dto.model_dump(exclude={"created_at", "updated_at"})
        return self._row_type(**values)
