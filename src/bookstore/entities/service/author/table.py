"""Author database table model."""

from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship

from src.bookstore.entities._base import EntityTable

if TYPE_CHECKING:
    from src.bookstore.entities.service.book.table import BookTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors.

    Deleting an author deletes its books.
    """

    __tablename__ = "authors"

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    bio: str | None = Field(default=None, max_length=250)

    books: list["BookTable"] = Relationship(
        back_populates="author",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
