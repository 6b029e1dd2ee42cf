"""Password sign-in and identity lookup."""

from dataclasses import dataclass
from functools import lru_cache

from loguru import logger
from sqlmodel import Session

from src.bookstore.core.security import hash_password, verify_password
from src.bookstore.entities.core.user import RoleTable, User, UserRepository


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # Checked for unknown usernames so both failure paths cost one bcrypt round
    return hash_password("not-a-real-password")


@dataclass(frozen=True)
class SignInResult:
    succeeded: bool
    username: str


class CredentialService:
    """Verifies credentials and reads identity records.

    Sign-in is non-persistent and never locks accounts: failed attempts are
    not counted.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._users = UserRepository(session)

    def password_sign_in(self, username: str, password: str) -> SignInResult:
        row = self._users.get_row_by_username(username)
        if row is None:
            verify_password(password, _dummy_hash())
            return SignInResult(succeeded=False, username=username)
        return SignInResult(
            succeeded=verify_password(password, row.password_hash), username=username
        )

    def find_by_name(self, username: str) -> User | None:
        return self._users.get_by_username(username)

    def get_roles(self, user: User) -> list[str]:
        return self._users.get_roles(user.id)

    def ensure_role(self, name: str) -> RoleTable:
        role = self._users.get_role(name)
        if role is None:
            logger.info("Creating role {}", name)
            role = self._users.add_role(name)
        return role

    def register(
        self, username: str, email: str, password: str, roles: list[str] | None = None
    ) -> User:
        """Create a user with the given roles, creating missing roles on the way.

        Raises:
            ValueError: If the username is already taken
        """
        if self._users.get_row_by_username(username) is not None:
            raise ValueError(f"User {username} already exists")

        role_rows = [self.ensure_role(name) for name in roles or []]
        user = self._users.create(
            username=username,
            email=email,
            password_hash=hash_password(password),
            roles=role_rows,
        )
        self._session.commit()
        logger.info("Registered user {} with roles {}", username, roles or [])
        return user
