"""Controllers: request orchestration between routers and repositories."""

from .auth import AuthController
from .authors import AuthorsController
from .base import GENERIC_ERROR_MESSAGE, BaseController, CrudController
from .books import BooksController

__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "AuthController",
    "AuthorsController",
    "BaseController",
    "BooksController",
    "CrudController",
]
