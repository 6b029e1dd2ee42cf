from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from starlette.responses import JSONResponse, Response

from src.bookstore.api.http.controllers.base import (
    BaseController,
    bad_request,
    validation_errors,
)
from src.bookstore.core.services.jwt.jwt_gen import JwtGeneratorService
from src.bookstore.core.services.user.credential_service import CredentialService
from src.bookstore.entities.core.user import LoginRequest, TokenResponse

if TYPE_CHECKING:
    from loguru import Logger

INVALID_CREDENTIALS = "Invalid username or password"


class AuthController(BaseController):
    """Exchanges a username and password for a signed bearer token."""

    name = "Users"

    def __init__(
        self,
        credentials: CredentialService,
        tokens: JwtGeneratorService,
        log: Logger,
    ) -> None:
        super().__init__(log)
        self._credentials = credentials
        self._tokens = tokens

    def login(self, payload: dict[str, Any] | None) -> Response:
        location = self._location("Login")
        try:
            if payload is None:
                self._log.warning("{}: Empty request was submitted", location)
                return bad_request("Request body is required")
            try:
                request = LoginRequest.model_validate(payload)
            except ValidationError as exc:
                self._log.warning("{}: Data was Incomplete", location)
                return bad_request("Data was incomplete", validation_errors(exc))

            self._log.info("{}: Login Attempted from user {}", location, request.username)
            result = self._credentials.password_sign_in(
                request.username, request.password.get_secret_value()
            )
            if not result.succeeded:
                self._log.info("{}: {} Not Authenticated", location, request.username)
                return JSONResponse(
                    {"detail": INVALID_CREDENTIALS},
                    status_code=401,
                    headers={"WWW-Authenticate": "Bearer"},
                )

            user = self._credentials.find_by_name(request.username)
            if user is None:
                return self._internal_error(
                    f"{location}: User {request.username} vanished after sign-in"
                )
            roles = self._credentials.get_roles(user)
            token = self._tokens.generate_user_token(user, roles)

            self._log.info("{}: {} Successfully Authenticated", location, request.username)
            return JSONResponse(TokenResponse(token=token).to_json())
        except Exception as exc:
            return self._internal_error(location, exc)
