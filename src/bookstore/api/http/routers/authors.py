"""Author API router with CRUD operations. Every route requires a bearer token."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from starlette.responses import Response

from src.bookstore.api.http.controllers import AuthorsController
from src.bookstore.api.http.deps import (
    get_authors_controller,
    get_current_principal,
    require_admin,
)

router = APIRouter(
    prefix="/authors",
    tags=["authors"],
    dependencies=[Depends(get_current_principal)],
)


@router.get("")
def list_authors(
    controller: AuthorsController = Depends(get_authors_controller),
) -> Response:
    """List all authors with their books."""
    return controller.list()


@router.get("/{item_id}")
def get_author(
    item_id: int,
    controller: AuthorsController = Depends(get_authors_controller),
) -> Response:
    """Get an author by ID."""
    return controller.get(item_id)


@router.post("", status_code=201, dependencies=[Depends(require_admin)])
def create_author(
    payload: dict[str, Any] | None = Body(default=None),
    controller: AuthorsController = Depends(get_authors_controller),
) -> Response:
    """Create a new author."""
    return controller.create(payload)


@router.put("/{item_id}", status_code=204, dependencies=[Depends(require_admin)])
def update_author(
    item_id: int,
    payload: dict[str, Any] | None = Body(default=None),
    controller: AuthorsController = Depends(get_authors_controller),
) -> Response:
    """Replace an author. The body id must match the path."""
    return controller.update(item_id, payload)


@router.delete("/{item_id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_author(
    item_id: int,
    controller: AuthorsController = Depends(get_authors_controller),
) -> Response:
    """Delete an author together with their books."""
    return controller.delete(item_id)
