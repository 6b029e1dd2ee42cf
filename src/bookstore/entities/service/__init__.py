"""Catalog entities: authors and the books they own."""

from .author import AuthorCreate, AuthorRead, AuthorRepository, AuthorTable, AuthorUpdate
from .book import BookCreate, BookRead, BookRepository, BookTable, BookUpdate
from .summaries import AuthorSummary, BookSummary

__all__ = [
    "AuthorCreate",
    "AuthorRead",
    "AuthorRepository",
    "AuthorSummary",
    "AuthorTable",
    "AuthorUpdate",
    "BookCreate",
    "BookRead",
    "BookRepository",
    "BookSummary",
    "BookTable",
    "BookUpdate",
]
