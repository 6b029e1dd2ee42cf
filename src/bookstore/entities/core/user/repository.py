"""User data-access layer."""

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from src.bookstore.entities.core.user.entity import User
from src.bookstore.entities.core.user.table import RoleTable, UserTable


class UserRepository:
    """Data-access layer for users and their roles."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_row_by_username(self, username: str) -> UserTable | None:
        statement = (
            select(UserTable)
            .where(UserTable.username == username)
            .options(selectinload(UserTable.roles))
        )
        return self._session.exec(statement).first()

    def get_by_username(self, username: str) -> User | None:
        row = self.get_row_by_username(username)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_roles(self, user_id: int) -> list[str]:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return []
        return sorted(role.name for role in row.roles)

    def list_all(self) -> list[UserTable]:
        statement = select(UserTable).options(selectinload(UserTable.roles))
        return list(self._session.exec(statement).all())

    def get_role(self, name: str) -> RoleTable | None:
        return self._session.exec(select(RoleTable).where(RoleTable.name == name)).first()

    def add_role(self, name: str) -> RoleTable:
        role = RoleTable(name=name)
        self._session.add(role)
        self._session.flush()
        return role

    def create(self, username: str, email: str, password_hash: str, roles: list[RoleTable]) -> User:
        row = UserTable(username=username, email=email, password_hash=password_hash)
        row.roles = roles
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)
