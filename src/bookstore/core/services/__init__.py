"""Core services exports."""

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# JWT Services
from .jwt.jwt_gen import JwtGeneratorService, TokenIssueError
from .jwt.jwt_verify import JwtVerificationService, TokenVerificationError

# Mapping
from .mapping import EntityMapper

# User Services
from .user.credential_service import CredentialService, SignInResult

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    # JWT Services
    "JwtGeneratorService",
    "JwtVerificationService",
    "TokenIssueError",
    "TokenVerificationError",
    # Mapping
    "EntityMapper",
    # User Services
    "CredentialService",
    "SignInResult",
]
