"""Action errors surfaced to callers with a symbolic code."""

from enum import Enum


class ActionErrorCode(str, Enum):
    """Symbolic failure codes returned in the error envelope."""

    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class ActionError(Exception):
    """Base class for failures raised by action handlers."""

    code: ActionErrorCode = ActionErrorCode.INTERNAL_SERVER_ERROR
    status_code: int = 500
    default_message: str = "An unexpected error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthorizedError(ActionError):
    """Raised when the request carries no resolvable identity."""

    code = ActionErrorCode.UNAUTHORIZED
    status_code = 401
    default_message = "You must be signed in to perform this action."


class NotFoundError(ActionError):
    """Raised when a resource is missing or not owned by the caller.

    Both cases share this error so callers cannot probe for other users' ids.
    """

    code = ActionErrorCode.NOT_FOUND
    status_code = 404
    default_message = "Not found."


class ValidationFailedError(ActionError):
    """Raised when input violates its declared contract."""

    code = ActionErrorCode.BAD_REQUEST
    status_code = 400
    default_message = "Invalid input."

    def __init__(self, message: str | None = None, details: list[dict] | None = None) -> None:
        self.details = details or []
        super().__init__(message)
