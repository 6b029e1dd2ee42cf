"""User, role and membership tables."""

from sqlmodel import Field, Relationship, SQLModel

from src.bookstore.entities._base import EntityTable


class UserRoleLink(SQLModel, table=True):
    """Membership of a user in a role."""

    __tablename__ = "user_roles"

    user_id: int | None = Field(default=None, foreign_key="users.id", primary_key=True)
    role_id: int | None = Field(default=None, foreign_key="roles.id", primary_key=True)


class RoleTable(EntityTable, table=True):
    __tablename__ = "roles"

    name: str = Field(unique=True, index=True, max_length=64)

    users: list["UserTable"] = Relationship(back_populates="roles", link_model=UserRoleLink)


class UserTable(EntityTable, table=True):
    """Database persistence model for login identities.

    Only a bcrypt hash of the password is stored.
    """

    __tablename__ = "users"

    username: str = Field(unique=True, index=True, max_length=256)
    email: str = Field(max_length=256)
    password_hash: str

    roles: list[RoleTable] = Relationship(back_populates="users", link_model=UserRoleLink)
