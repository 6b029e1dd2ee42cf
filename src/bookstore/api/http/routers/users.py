"""Login endpoint issuing bearer tokens."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from starlette.responses import Response

from src.bookstore.api.http.controllers import AuthController
from src.bookstore.api.http.deps import get_auth_controller

router = APIRouter(prefix="/users", tags=["users"])


@router.post("")
def login(
    payload: dict[str, Any] | None = Body(default=None),
    controller: AuthController = Depends(get_auth_controller),
) -> Response:
    """Exchange a username and password for a token valid for a few minutes."""
    return controller.login(payload)
