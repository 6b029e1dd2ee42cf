"""Entity package: Author."""

from .repository import AuthorRepository
from .schemas import AuthorCreate, AuthorRead, AuthorUpdate
from .table import AuthorTable

__all__ = ["AuthorCreate", "AuthorRead", "AuthorRepository", "AuthorTable", "AuthorUpdate"]
