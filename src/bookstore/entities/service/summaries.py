"""Compact read models nested inside the other entity's read model."""

from src.bookstore.entities._base import Schema


class AuthorSummary(Schema):
    id: int
    first_name: str
    last_name: str


class BookSummary(Schema):
    id: int
    title: str
    year: int | None = None
    isbn: str
