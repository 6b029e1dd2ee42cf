"""Transfer models for the login endpoint."""

from typing import Annotated

from pydantic import SecretStr, StringConstraints

from src.bookstore.entities._base import Schema


class LoginRequest(Schema):
    username: Annotated[str, StringConstraints(min_length=1)]
    password: SecretStr


class TokenResponse(Schema):
    token: str
