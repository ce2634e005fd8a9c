"""Pydantic schemas for quote collection endpoints."""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from quoteforge.infrastructure.api.schemas.common_schemas import CamelModel, as_utc


class CreateCollectionRequest(CamelModel):
    """Request body for creating a collection."""

    name: str = Field(..., min_length=1, description="Display name")
    description: str | None = Field(default=None, description="Optional description")
    icon: str | None = Field(default=None, description="Optional icon reference")
    is_default: bool = Field(default=False, description="Marks the user's default collection")


class UpdateCollectionRequest(CamelModel):
    """Request body for a partial collection update.

    Omitted (or null) fields are left unchanged. At least one field must be
    provided.
    """

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    icon: str | None = None
    is_default: bool | None = None

    @model_validator(mode="after")
    def require_one_field(self) -> "UpdateCollectionRequest":
        if not self.changes():
            raise PydanticCustomError(
                "no_fields", "At least one field must be provided to update."
            )
        return self

    def changes(self) -> dict[str, Any]:
        """Return the provided fields keyed by model attribute name."""
        return self.model_dump(exclude_none=True)


class QuoteCollectionResponse(CamelModel):
    """A quote collection as returned by the API."""

    id: str
    user_id: str
    name: str
    description: str | None = None
    icon: str | None = None
    is_default: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamps(cls, v: datetime) -> datetime:
        return as_utc(v)


class CollectionData(CamelModel):
    collection: QuoteCollectionResponse


class CollectionListData(CamelModel):
    items: list[QuoteCollectionResponse]
    total: int
