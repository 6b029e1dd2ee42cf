"""Book data-access layer."""

from typing import Any

from sqlalchemy.orm import selectinload
from sqlmodel.sql.expression import SelectOfScalar

from src.bookstore.entities._repository import Repository
from src.bookstore.entities.service.book.table import BookTable


class BookRepository(Repository[BookTable]):
    """Data-access layer for books; the owning author is loaded with each book."""

    model = BookTable

    def _select(self) -> SelectOfScalar[Any]:
        return super()._select().options(selectinload(BookTable.author))
