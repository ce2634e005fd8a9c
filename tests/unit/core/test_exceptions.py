"""Unit tests for action error types."""

from quoteforge.core.exceptions import (
    ActionError,
    ActionErrorCode,
    NotFoundError,
    UnauthorizedError,
    ValidationFailedError,
)


def test_unauthorized_defaults():
    err = UnauthorizedError()

    assert isinstance(err, ActionError)
    assert err.code is ActionErrorCode.UNAUTHORIZED
    assert err.status_code == 401
    assert err.message == "You must be signed in to perform this action."


def test_not_found_custom_message():
    err = NotFoundError("Quote not found.")

    assert err.code is ActionErrorCode.NOT_FOUND
    assert err.status_code == 404
    assert str(err) == "Quote not found."


def test_validation_failed_carries_details():
    err = ValidationFailedError("bad", details=[{"field": "body.name", "message": "too short"}])

    assert err.code.value == "BAD_REQUEST"
    assert err.status_code == 400
    assert err.details == [{"field": "body.name", "message": "too short"}]


def test_validation_failed_details_default_empty():
    assert ValidationFailedError().details == []
