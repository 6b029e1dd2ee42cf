"""Book API router. All book routes are anonymous."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from starlette.responses import Response

from src.bookstore.api.http.controllers import BooksController
from src.bookstore.api.http.deps import get_books_controller

router = APIRouter(prefix="/books", tags=["books"])


@router.get("")
def list_books(
    controller: BooksController = Depends(get_books_controller),
) -> Response:
    """List all books with their author."""
    return controller.list()


@router.get("/{item_id}")
def get_book(
    item_id: int,
    controller: BooksController = Depends(get_books_controller),
) -> Response:
    """Get a book by ID."""
    return controller.get(item_id)


@router.post("", status_code=201)
def create_book(
    payload: dict[str, Any] | None = Body(default=None),
    controller: BooksController = Depends(get_books_controller),
) -> Response:
    """Create a new book for an existing author."""
    return controller.create(payload)


@router.put("/{item_id}", status_code=204)
def update_book(
    item_id: int,
    payload: dict[str, Any] | None = Body(default=None),
    controller: BooksController = Depends(get_books_controller),
) -> Response:
    """Replace a book. The body id must match the path."""
    return controller.update(item_id, payload)


@router.delete("/{item_id}", status_code=204)
def delete_book(
    item_id: int,
    controller: BooksController = Depends(get_books_controller),
) -> Response:
    """Delete a book."""
    return controller.delete(item_id)
