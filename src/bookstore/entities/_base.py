from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import Field, SQLModel


class EntityTable(SQLModel, table=False):
    """Base table with a store-generated integer identifier and timestamps."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier assigned by the store",
    )

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )


class Schema(BaseModel):
    """Base transfer model: camelCase on the wire, snake_case in Python.

    Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )

    def to_json(self) -> dict:
        """Serialise with wire aliases, ready for a JSON response."""
        return self.model_dump(mode="json", by_alias=True)
