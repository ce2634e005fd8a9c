"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with middleware, routes,
error envelopes and lifecycle handlers.
"""

import uuid
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quoteforge.core.config import get_settings
from quoteforge.core.exceptions import ActionError, ActionErrorCode
from quoteforge.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)
from quoteforge.infrastructure.api.schemas import ErrorResponse
from quoteforge.infrastructure.persistence.database import (
    close_database,
    get_db_manager,
    init_database,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the shared database handle on startup and dispose it on shutdown."""
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "Starting Quote Forge",
        version=settings.app_version,
        environment=settings.environment,
    )

    try:
        await init_database()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down Quote Forge")
    await close_database()
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Organize original quotes into collections",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints.

    Args:
        app: FastAPI application instance.
    """

    @app.get("/health", tags=["health"])
    async def health_check():
        """Return 200 while the process is serving requests."""
        return {
            "status": "healthy",
            "service": "quoteforge",
            "version": get_settings().app_version,
        }

    @app.get("/ready", tags=["health"])
    async def readiness_check():
        """Return 200 only if the database answers a trivial query."""
        db = get_db_manager()
        if await db.check_connection():
            return {
                "status": "ready",
                "service": "quoteforge",
                "version": get_settings().app_version,
                "database": "connected",
            }
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "service": "quoteforge",
                "database": "disconnected",
            },
        )

    @app.get("/live", tags=["health"])
    async def liveness_check():
        return {
            "status": "alive",
            "service": "quoteforge",
            "version": get_settings().app_version,
        }


def register_routes(app: FastAPI) -> None:
    """Register API routes.

    Args:
        app: FastAPI application instance.
    """
    from quoteforge.infrastructure.api.routes import collections_router, quotes_router

    settings = get_settings()

    app.include_router(
        collections_router,
        prefix=f"{settings.api_prefix}/collections",
        tags=["collections"],
    )
    app.include_router(
        quotes_router,
        prefix=f"{settings.api_prefix}/collections/{{collection_id}}/quotes",
        tags=["quotes"],
    )


def _error_response(
    status_code: int, code: str, message: str, details: list[dict] | None = None
) -> JSONResponse:
    body = ErrorResponse.build(code=code, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    """Translate failures into the error envelope.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(ActionError)
    async def action_error_handler(request: Request, exc: ActionError):
        return _error_response(
            exc.status_code,
            exc.code.value,
            exc.message,
            getattr(exc, "details", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ())),
                "message": err.get("msg", "Invalid value"),
            }
            for err in exc.errors()
        ]
        message = details[0]["message"] if details else "Invalid input."
        logger.info(
            "Request validation failed",
            path=str(request.url.path),
            error_count=len(details),
        )
        return _error_response(400, ActionErrorCode.BAD_REQUEST.value, message, details)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        try:
            code = HTTPStatus(exc.status_code).name
        except ValueError:
            code = "HTTP_ERROR"
        return _error_response(exc.status_code, code, str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        message = str(exc) if get_settings().debug else "An unexpected error occurred."
        return _error_response(500, ActionErrorCode.INTERNAL_SERVER_ERROR.value, message)


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware.

    Args:
        app: FastAPI application instance.
    """

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log every request and tag it with a correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID", f"cid_{uuid.uuid4().hex[:12]}")
        bind_correlation_id(correlation_id)

        logger.info(
            "Request started",
            method=request.method,
            path=str(request.url.path),
        )

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


# Create the application instance
app = create_app()
