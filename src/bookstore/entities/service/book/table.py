"""Book database table model."""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from src.bookstore.entities._base import EntityTable

if TYPE_CHECKING:
    from src.bookstore.entities.service.author.table import AuthorTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books."""

    __tablename__ = "books"

    title: str = Field(max_length=200)
    year: int | None = None
    isbn: str = Field(max_length=20)
    summary: str | None = Field(default=None, max_length=500)
    image: str | None = None
    price: float | None = None
    author_id: int = Field(foreign_key="authors.id", index=True, ondelete="CASCADE")

    author: Optional["AuthorTable"] = Relationship(back_populates="books")
