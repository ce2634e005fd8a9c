"""Domain services for Quote Forge.

Services hold the action logic: identity has already been resolved, and
each service call authorizes and performs one store operation.
"""

from quoteforge.domain.services.ownership_guard import (
    CollectionOwnershipGuard,
    OwnedResourceGuard,
    OwnedResourceRepository,
)
from quoteforge.domain.services.quote_collection_service import (
    COLLECTION_PATCHABLE_FIELDS,
    QuoteCollectionService,
)
from quoteforge.domain.services.quote_service import QUOTE_PATCHABLE_FIELDS, QuoteService

__all__ = [
    "COLLECTION_PATCHABLE_FIELDS",
    "CollectionOwnershipGuard",
    "OwnedResourceGuard",
    "OwnedResourceRepository",
    "QUOTE_PATCHABLE_FIELDS",
    "QuoteCollectionService",
    "QuoteService",
]
