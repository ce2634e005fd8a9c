"""Quote action routes, nested under the owning collection.

createQuote, updateQuote, deleteQuote and listQuotes.
"""

from typing import Annotated

from fastapi import APIRouter, Query, status

from quoteforge.domain.services import QuoteService
from quoteforge.infrastructure.api.dependencies import AuthenticatedUser, DbSession
from quoteforge.infrastructure.api.schemas import (
    ActionResponse,
    CreateQuoteRequest,
    EmptyActionResponse,
    ListQuotesQuery,
    QuoteData,
    QuoteListData,
    QuoteResponse,
    UpdateQuoteRequest,
)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ActionResponse[QuoteData],
)
async def create_quote(
    collection_id: str,
    request: CreateQuoteRequest,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> ActionResponse[QuoteData]:
    """Create a quote in one of the caller's collections."""
    service = QuoteService(session)
    quote = await service.create_quote(
        user_id=current_user.user_id,
        collection_id=collection_id,
        text=request.text,
        attributed_to=request.attributed_to,
        mood=request.mood,
        tags=request.tags,
        language=request.language,
        is_favorite=request.is_favorite,
        is_public=request.is_public,
    )
    await session.commit()

    return ActionResponse[QuoteData](data=QuoteData(quote=QuoteResponse.model_validate(quote)))


@router.patch(
    "/{quote_id}",
    response_model=ActionResponse[QuoteData],
)
async def update_quote(
    collection_id: str,
    quote_id: str,
    request: UpdateQuoteRequest,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> ActionResponse[QuoteData]:
    """Apply a partial update to a quote in one of the caller's collections."""
    service = QuoteService(session)
    quote = await service.update_quote(
        user_id=current_user.user_id,
        collection_id=collection_id,
        quote_id=quote_id,
        changes=request.changes(),
    )
    await session.commit()

    return ActionResponse[QuoteData](data=QuoteData(quote=QuoteResponse.model_validate(quote)))


@router.delete(
    "/{quote_id}",
    response_model=EmptyActionResponse,
)
async def delete_quote(
    collection_id: str,
    quote_id: str,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> EmptyActionResponse:
    """Delete a quote from one of the caller's collections."""
    service = QuoteService(session)
    await service.delete_quote(
        user_id=current_user.user_id,
        collection_id=collection_id,
        quote_id=quote_id,
    )
    await session.commit()

    return EmptyActionResponse()


@router.get(
    "",
    response_model=ActionResponse[QuoteListData],
)
async def list_quotes(
    collection_id: str,
    current_user: AuthenticatedUser,
    session: DbSession,
    filters: Annotated[ListQuotesQuery, Query()],
) -> ActionResponse[QuoteListData]:
    """List the caller's quotes in one collection."""
    service = QuoteService(session)
    quotes = await service.list_quotes(
        user_id=current_user.user_id,
        collection_id=collection_id,
        favorites_only=filters.favorites_only,
        include_public=filters.include_public,
    )

    items = [QuoteResponse.model_validate(q) for q in quotes]
    return ActionResponse[QuoteListData](data=QuoteListData(items=items, total=len(items)))
