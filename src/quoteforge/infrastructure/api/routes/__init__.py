"""API Routes for Quote Forge."""

from quoteforge.infrastructure.api.routes.collections_router import router as collections_router
from quoteforge.infrastructure.api.routes.quotes_router import router as quotes_router

__all__ = [
    "collections_router",
    "quotes_router",
]
