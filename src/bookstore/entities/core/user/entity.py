"""User domain entity."""

from typing import Any

from pydantic import BaseModel, Field


class User(BaseModel):
    """Identity record read by the login flow.

    Carries no password material.
    """

    id: int = Field(description="Internal user identifier")
    username: str = Field(description="Login name")
    email: str = Field(description="User's email address, used as the token subject")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, User):
            return False
        return (
            self.id == other.id
            and self.username == other.username
            and self.email == other.email
        )

    def __hash__(self) -> int:
        return hash((self.id, self.username, self.email))
