from typing import Any

from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """Verified claims of a bearer token, as seen by route dependencies."""

    subject: str = Field(description="Token subject, the user's email")
    user_id: str | None = Field(default=None, description="User's internal identifier")
    roles: list[str] = Field(default_factory=list)
    jti: str | None = None
    issuer: str | None = None
    audience: str | list[str] | None = None
    issued_at: int | None = None
    expires_at: int | None = None
    raw: dict[str, Any] = Field(default_factory=dict, description="All decoded claims")

    def has_role(self, role: str) -> bool:
        return role in self.roles
