"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from fastapi import Depends, HTTPException, Request
from loguru import logger
from sqlmodel import Session

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.api.http.controllers import (
    AuthController,
    AuthorsController,
    BooksController,
)
from src.bookstore.core.models import TokenClaims
from src.bookstore.core.services import (
    CredentialService,
    EntityMapper,
    JwtGeneratorService,
    JwtVerificationService,
    TokenVerificationError,
)
from src.bookstore.entities.service.author import AuthorRead, AuthorRepository, AuthorTable
from src.bookstore.entities.service.book import BookRead, BookRepository, BookTable
from src.bookstore.runtime.context import get_config

if TYPE_CHECKING:
    from loguru import Logger

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[Session]:
    """Open one session per request and close it when the response is sent."""
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_jwt_verify_service(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> JwtVerificationService:
    """Get the JWT verification service instance."""
    return app_deps.jwt_verify_service


def get_jwt_generation_service(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> JwtGeneratorService:
    """Get the JWT generation service instance."""
    return app_deps.jwt_generation_service


def get_logger(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Logger:
    """Get the application logger."""
    return app_deps.logger


def get_authors_controller(
    session: Session = Depends(get_db_session),
    log=Depends(get_logger),
) -> AuthorsController:
    return AuthorsController(
        AuthorRepository(session), EntityMapper(AuthorTable, AuthorRead), log
    )


def get_books_controller(
    session: Session = Depends(get_db_session),
    log=Depends(get_logger),
) -> BooksController:
    return BooksController(
        BookRepository(session),
        EntityMapper(BookTable, BookRead),
        AuthorRepository(session),
        log,
    )


def get_auth_controller(
    session: Session = Depends(get_db_session),
    tokens: JwtGeneratorService = Depends(get_jwt_generation_service),
    log=Depends(get_logger),
) -> AuthController:
    return AuthController(CredentialService(session), tokens, log)


async def get_current_principal(
    request: Request,
    jwt_verify: JwtVerificationService = Depends(get_jwt_verify_service),
) -> TokenClaims:
    """Authenticate the request using a Bearer token."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(
            status_code=401, detail="Missing Bearer token", headers=_BEARER_CHALLENGE
        )

    token = auth_header.split(" ", 1)[1].strip()
    try:
        claims = jwt_verify.verify_jwt(token)
    except TokenVerificationError as exc:
        logger.info("Bearer authentication failed: {}", exc)
        raise HTTPException(
            status_code=401, detail="Invalid or expired token", headers=_BEARER_CHALLENGE
        ) from None

    request.state.claims = claims
    request.state.roles = set(claims.roles)
    return claims


async def require_admin(
    claims: TokenClaims = Depends(get_current_principal),
) -> TokenClaims:
    """Require the configured administrator role."""
    admin_role = get_config().security.admin_role
    if not claims.has_role(admin_role):
        raise HTTPException(status_code=403, detail=f"Missing required role: {admin_role}")
    return claims
