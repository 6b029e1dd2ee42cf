from __future__ import annotations

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from src.bookstore.core.services import (
    CredentialService,
    DbManageService,
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
)
from src.bookstore.entities.core.user import User

__all__ = [
    "credential_service",
    "database_service",
    "jwt_generate_service",
    "jwt_verify_service",
    "seeded_users",
]


@pytest.fixture
def jwt_generate_service() -> JwtGeneratorService:
    return JwtGeneratorService()


@pytest.fixture
def jwt_verify_service() -> JwtVerificationService:
    return JwtVerificationService()


@pytest.fixture
def database_service(engine: Engine) -> DbSessionService:
    return DbSessionService(engine=engine)


@pytest.fixture
def credential_service(session: Session) -> CredentialService:
    return CredentialService(session)


@pytest.fixture
def seeded_users(database_service: DbSessionService, test_config) -> dict[str, User]:
    """Seed the configured roles and users; return them keyed by username."""
    DbManageService(database_service).seed(test_config.seed)
    with database_service.session_scope() as session:
        service = CredentialService(session)
        return {user.username: service.find_by_name(user.username) for user in test_config.seed.users}
