"""Structured logging with per-request correlation IDs.

Quote Forge logs through structlog. Development runs render colored console
lines; every other environment emits one JSON object per event.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from quoteforge.core.config import Settings, get_settings


def add_logger_name(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the logger name, falling back to the application name.

    PrintLogger instances have no ``name`` attribute, so
    ``structlog.stdlib.add_logger_name`` cannot be used here.
    """
    event_dict["logger"] = getattr(logger, "name", None) or "quoteforge"
    return event_dict


def rename_message_field(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename structlog's ``event`` key to ``message``."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and the standard library root logger.

    Args:
        settings: Optional settings instance. Loaded from the environment when omitted.
    """
    if settings is None:
        settings = get_settings()

    level = getattr(logging, settings.log_level)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development or settings.log_format == "console":
        renderer: Processor = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )
        cache_loggers = False
    else:
        shared_processors.append(structlog.processors.format_exc_info)
        shared_processors.append(rename_message_field)
        renderer = structlog.processors.JSONRenderer()
        cache_loggers = True

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )

    # Third-party libraries (uvicorn, sqlalchemy) still use the stdlib logger.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        logging.getLogger(logger_name).setLevel(level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Optional logger name. Defaults to 'quoteforge'.
    """
    return structlog.get_logger(name or "quoteforge")


def bind_correlation_id(correlation_id: str) -> None:
    """Bind a correlation ID to the current logging context."""
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_context() -> None:
    """Drop all context variables so they do not leak between requests."""
    structlog.contextvars.clear_contextvars()
