from __future__ import annotations

from typing import TYPE_CHECKING, Any

from src.bookstore.api.http.controllers.base import CrudController
from src.bookstore.core.services.mapping import EntityMapper
from src.bookstore.entities.service.author import AuthorRepository
from src.bookstore.entities.service.book import (
    BookCreate,
    BookRead,
    BookRepository,
    BookTable,
    BookUpdate,
)

if TYPE_CHECKING:
    from loguru import Logger


class BooksController(CrudController[BookTable, BookRead]):
    name = "Books"
    resource_path = "/books"
    create_schema = BookCreate
    update_schema = BookUpdate

    def __init__(
        self,
        repository: BookRepository,
        mapper: EntityMapper[BookTable, BookRead],
        authors: AuthorRepository,
        log: Logger,
    ) -> None:
        super().__init__(repository, mapper, log)
        self._authors = authors

    def check_references(self, dto: BookCreate) -> list[dict[str, Any]]:
        if self._authors.exists(dto.author_id):
            return []
        return [
            {
                "type": "reference_missing",
                "loc": ["body", "authorId"],
                "msg": f"Author {dto.author_id} does not exist",
            }
        ]
