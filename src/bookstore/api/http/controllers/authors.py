from src.bookstore.api.http.controllers.base import CrudController
from src.bookstore.entities.service.author import (
    AuthorCreate,
    AuthorRead,
    AuthorTable,
    AuthorUpdate,
)


class AuthorsController(CrudController[AuthorTable, AuthorRead]):
    name = "Authors"
    resource_path = "/authors"
    create_schema = AuthorCreate
    update_schema = AuthorUpdate
