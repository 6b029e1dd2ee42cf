"""Transfer models for the Book API."""

from typing import Annotated

from pydantic import Field, StringConstraints

from src.bookstore.entities._base import Schema
from src.bookstore.entities.service.summaries import AuthorSummary


class BookCreate(Schema):
    """Payload for creating a book. Identifiers are assigned by the store."""

    title: Annotated[str, StringConstraints(min_length=1, max_length=200)]
    year: int | None = None
    isbn: Annotated[str, StringConstraints(min_length=1, max_length=20)]
    summary: Annotated[str, StringConstraints(max_length=500)] | None = None
    image: str | None = None
    price: Annotated[float, Field(ge=0)] | None = None
    author_id: int = Field(ge=1)


class BookUpdate(BookCreate):
    """Payload for replacing a book; ``id`` must match the path."""

    id: int = Field(ge=1)


class BookRead(Schema):
    id: int
    title: str
    year: int | None = None
    isbn: str
    summary: str | None = None
    image: str | None = None
    price: float | None = None
    author_id: int
    author: AuthorSummary | None = None
