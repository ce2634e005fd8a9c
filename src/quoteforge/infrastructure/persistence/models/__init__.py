"""SQLAlchemy models for the Quote Forge tables.

All models inherit from the Base class defined in database.py and are
created on application startup in development mode.
"""

from quoteforge.infrastructure.persistence.models.quote import QuoteModel
from quoteforge.infrastructure.persistence.models.quote_collection import (
    QuoteCollectionModel,
)

__all__ = [
    "QuoteCollectionModel",
    "QuoteModel",
]
