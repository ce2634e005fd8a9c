"""Pydantic schemas for API requests and responses."""

from quoteforge.infrastructure.api.schemas.collection_schemas import (
    CollectionData,
    CollectionListData,
    CreateCollectionRequest,
    QuoteCollectionResponse,
    UpdateCollectionRequest,
)
from quoteforge.infrastructure.api.schemas.common_schemas import (
    ActionResponse,
    CamelModel,
    EmptyActionResponse,
    ErrorBody,
    ErrorDetail,
    ErrorResponse,
)
from quoteforge.infrastructure.api.schemas.quote_schemas import (
    CreateQuoteRequest,
    ListQuotesQuery,
    QuoteData,
    QuoteListData,
    QuoteResponse,
    UpdateQuoteRequest,
)

__all__ = [
    "ActionResponse",
    "CamelModel",
    "CollectionData",
    "CollectionListData",
    "CreateCollectionRequest",
    "CreateQuoteRequest",
    "EmptyActionResponse",
    "ErrorBody",
    "ErrorDetail",
    "ErrorResponse",
    "ListQuotesQuery",
    "QuoteCollectionResponse",
    "QuoteData",
    "QuoteListData",
    "QuoteResponse",
    "UpdateCollectionRequest",
    "UpdateQuoteRequest",
]
