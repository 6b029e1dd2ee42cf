"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- table.py: Database persistence model
- schemas.py / entity.py: Transfer or domain models
- repository.py: Data access layer

Importing this package registers every table with the SQLModel metadata.
"""

from .core.user import RoleTable, User, UserRepository, UserRoleLink, UserTable
from .service.author import AuthorRepository, AuthorTable
from .service.book import BookRepository, BookTable

__all__ = [
    "AuthorRepository",
    "AuthorTable",
    "BookRepository",
    "BookTable",
    "RoleTable",
    "User",
    "UserRepository",
    "UserRoleLink",
    "UserTable",
]
