"""Pydantic schemas for quote endpoints."""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from quoteforge.infrastructure.api.schemas.common_schemas import CamelModel, as_utc


class CreateQuoteRequest(CamelModel):
    """Request body for creating a quote.

    The collection is taken from the URL path.
    """

    text: str = Field(..., min_length=1, description="The quote itself")
    attributed_to: str | None = Field(default=None, description="Who said it")
    mood: str | None = Field(default=None, description="e.g. inspiring, calm, funny")
    tags: str | None = Field(default=None, description="Comma-separated or JSON tags")
    language: str | None = Field(default=None, description="Language code")
    is_favorite: bool = False
    is_public: bool = False


class UpdateQuoteRequest(CamelModel):
    """Request body for a partial quote update.

    Omitted (or null) fields are left unchanged. At least one field must be
    provided.
    """

    text: str | None = Field(default=None, min_length=1)
    attributed_to: str | None = None
    mood: str | None = None
    tags: str | None = None
    language: str | None = None
    is_favorite: bool | None = None
    is_public: bool | None = None

    @model_validator(mode="after")
    def require_one_field(self) -> "UpdateQuoteRequest":
        if not self.changes():
            raise PydanticCustomError(
                "no_fields", "At least one field must be provided to update."
            )
        return self

    def changes(self) -> dict[str, Any]:
        """Return the provided fields keyed by model attribute name."""
        return self.model_dump(exclude_none=True)


class ListQuotesQuery(CamelModel):
    """Query string filters for listing quotes."""

    favorites_only: bool = False
    include_public: bool = False


class QuoteResponse(CamelModel):
    """A quote as returned by the API."""

    id: str
    collection_id: str
    user_id: str
    text: str
    attributed_to: str | None = None
    mood: str | None = None
    tags: str | None = None
    language: str | None = None
    is_favorite: bool
    is_public: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamps(cls, v: datetime) -> datetime:
        return as_utc(v)


class QuoteData(CamelModel):
    quote: QuoteResponse


class QuoteListData(CamelModel):
    items: list[QuoteResponse]
    total: int
