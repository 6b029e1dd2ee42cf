"""Transfer models for the Author API."""

from typing import Annotated

from pydantic import Field, StringConstraints

from src.bookstore.entities._base import Schema
from src.bookstore.entities.service.summaries import BookSummary

Name = Annotated[str, StringConstraints(min_length=1, max_length=100)]


class AuthorCreate(Schema):
    """Payload for creating an author. Identifiers are assigned by the store."""

    first_name: Name
    last_name: Name
    bio: Annotated[str, StringConstraints(max_length=250)] | None = None


class AuthorUpdate(AuthorCreate):
    """Payload for replacing an author; ``id`` must match the path."""

    id: int = Field(ge=1)


class AuthorRead(Schema):
    id: int
    first_name: str
    last_name: str
    bio: str | None = None
    books: list[BookSummary] = Field(default_factory=list)
