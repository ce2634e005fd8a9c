"""Envelope schemas shared by every action endpoint.

Success bodies look like ``{"success": true, "data": {...}}``; failures look
like ``{"success": false, "error": {"code": ..., "message": ...}}``.
"""

from datetime import datetime, timezone
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps.

    Timestamps are written in UTC, but SQLite hands them back without an
    offset.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CamelModel(BaseModel):
    """Base model exposing camelCase keys on the wire.

    Snake_case names are accepted on input as well.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ActionResponse(BaseModel, Generic[DataT]):
    """Successful action result."""

    success: Literal[True] = True
    data: DataT


class EmptyActionResponse(BaseModel):
    """Successful action result without a payload."""

    success: Literal[True] = True


class ErrorDetail(BaseModel):
    """Detail for a single input validation error."""

    field: str = Field(..., description="Dotted location of the invalid input")
    message: str = Field(..., description="Human-readable error message")


class ErrorBody(BaseModel):
    """Structured failure carried in the error envelope."""

    code: str = Field(..., description="Symbolic error code, e.g. NOT_FOUND")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] | None = Field(
        default=None, description="Per-field validation errors"
    )


class ErrorResponse(BaseModel):
    """Failed action result."""

    success: Literal[False] = False
    error: ErrorBody

    @classmethod
    def build(
        cls, code: str, message: str, details: list[dict[str, Any]] | None = None
    ) -> "ErrorResponse":
        return cls(
            error=ErrorBody(
                code=code,
                message=message,
                details=[ErrorDetail(**d) for d in details] if details else None,
            )
        )
