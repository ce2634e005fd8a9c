"""Core Quote Forge utilities.

This module exports configuration, logging and error types used
throughout the application.
"""

from quoteforge.core.config import Settings, get_settings
from quoteforge.core.exceptions import (
    ActionError,
    ActionErrorCode,
    NotFoundError,
    UnauthorizedError,
    ValidationFailedError,
)
from quoteforge.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "ActionError",
    "ActionErrorCode",
    "NotFoundError",
    "Settings",
    "UnauthorizedError",
    "ValidationFailedError",
    "bind_correlation_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "get_settings",
]
