"""Collection action routes.

createCollection, updateCollection and listCollections.
"""

from fastapi import APIRouter, status

from quoteforge.domain.services import QuoteCollectionService
from quoteforge.infrastructure.api.dependencies import AuthenticatedUser, DbSession
from quoteforge.infrastructure.api.schemas import (
    ActionResponse,
    CollectionData,
    CollectionListData,
    CreateCollectionRequest,
    QuoteCollectionResponse,
    UpdateCollectionRequest,
)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ActionResponse[CollectionData],
)
async def create_collection(
    request: CreateCollectionRequest,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> ActionResponse[CollectionData]:
    """Create a collection owned by the caller."""
    service = QuoteCollectionService(session)
    collection = await service.create_collection(
        user_id=current_user.user_id,
        name=request.name,
        description=request.description,
        icon=request.icon,
        is_default=request.is_default,
    )
    await session.commit()

    return ActionResponse[CollectionData](
        data=CollectionData(collection=QuoteCollectionResponse.model_validate(collection))
    )


@router.patch(
    "/{collection_id}",
    response_model=ActionResponse[CollectionData],
)
async def update_collection(
    collection_id: str,
    request: UpdateCollectionRequest,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> ActionResponse[CollectionData]:
    """Apply a partial update to one of the caller's collections."""
    service = QuoteCollectionService(session)
    collection = await service.update_collection(
        user_id=current_user.user_id,
        collection_id=collection_id,
        changes=request.changes(),
    )
    await session.commit()

    return ActionResponse[CollectionData](
        data=CollectionData(collection=QuoteCollectionResponse.model_validate(collection))
    )


@router.get(
    "",
    response_model=ActionResponse[CollectionListData],
)
async def list_collections(
    current_user: AuthenticatedUser,
    session: DbSession,
) -> ActionResponse[CollectionListData]:
    """List every collection owned by the caller."""
    service = QuoteCollectionService(session)
    collections = await service.list_collections(current_user.user_id)

    items = [QuoteCollectionResponse.model_validate(c) for c in collections]
    return ActionResponse[CollectionListData](
        data=CollectionListData(items=items, total=len(items))
    )
