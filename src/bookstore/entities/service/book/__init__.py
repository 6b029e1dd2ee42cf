"""Entity package: Book."""

from .repository import BookRepository
from .schemas import BookCreate, BookRead, BookUpdate
from .table import BookTable

__all__ = ["BookCreate", "BookRead", "BookRepository", "BookTable", "BookUpdate"]
