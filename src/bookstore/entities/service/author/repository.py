"""Author data-access layer."""

from typing import Any

from sqlalchemy.orm import selectinload
from sqlmodel.sql.expression import SelectOfScalar

from src.bookstore.entities._repository import Repository
from src.bookstore.entities.service.author.table import AuthorTable


class AuthorRepository(Repository[AuthorTable]):
    """Data-access layer for authors; books are loaded with each author."""

    model = AuthorTable

    def _select(self) -> SelectOfScalar[Any]:
        return super()._select().options(selectinload(AuthorTable.books))
