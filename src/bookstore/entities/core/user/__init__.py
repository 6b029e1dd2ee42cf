"""User entity module.

- User: domain entity handed to the token issuer
- UserTable, RoleTable, UserRoleLink: persistence models
- LoginRequest, TokenResponse: login transfer models
- UserRepository: data access
"""

from .entity import User
from .repository import UserRepository
from .schemas import LoginRequest, TokenResponse
from .table import RoleTable, UserRoleLink, UserTable

__all__ = [
    "LoginRequest",
    "RoleTable",
    "TokenResponse",
    "User",
    "UserRepository",
    "UserRoleLink",
    "UserTable",
]
