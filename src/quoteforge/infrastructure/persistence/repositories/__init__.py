"""Persistence repositories for database operations."""

from quoteforge.infrastructure.persistence.repositories.quote_collection_repository import (
    QuoteCollectionRepository,
)
from quoteforge.infrastructure.persistence.repositories.quote_repository import (
    QuoteRepository,
)

__all__ = [
    "QuoteCollectionRepository",
    "QuoteRepository",
]
