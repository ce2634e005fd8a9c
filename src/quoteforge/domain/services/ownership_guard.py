"""Ownership checks for user-scoped resources.

A guard fetches a resource with an exact (id, owner) match and raises
``NotFoundError`` when nothing matches. Missing and foreign resources are
indistinguishable to the caller.

The check is current only as of the call. Writes that follow it must carry
the same owner filter in their own WHERE clause.
"""

from typing import Generic, Protocol, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from quoteforge.core.exceptions import NotFoundError
from quoteforge.core.logging import get_logger
from quoteforge.infrastructure.persistence.models import QuoteCollectionModel
from quoteforge.infrastructure.persistence.repositories import QuoteCollectionRepository

logger = get_logger(__name__)

T = TypeVar("T", covariant=True)


class OwnedResourceRepository(Protocol[T]):
    """Any repository able to look a resource up by (id, owner)."""

    async def get_owned(self, resource_id: str, user_id: str) -> T | None: ...


class OwnedResourceGuard(Generic[T]):
    """Authorize access to a resource owned by a single user.

    Args:
        repository: Repository used for the owner-scoped lookup.
        resource_name: Human-readable name used in the error message.
    """

    def __init__(self, repository: OwnedResourceRepository[T], resource_name: str) -> None:
        self.repository = repository
        self.resource_name = resource_name

    async def require_owned(self, resource_id: str, user_id: str) -> T:
        """Return the resource if ``user_id`` owns it.

        Raises:
            NotFoundError: If the resource does not exist or is owned by
                another user.
        """
        resource = await self.repository.get_owned(resource_id, user_id)
        if resource is None:
            logger.info(
                "Ownership check failed",
                resource=self.resource_name,
                resource_id=resource_id,
                user_id=user_id,
            )
            raise NotFoundError(f"{self.resource_name} not found.")
        return resource


class CollectionOwnershipGuard(OwnedResourceGuard[QuoteCollectionModel]):
    """Ownership guard for quote collections."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(QuoteCollectionRepository(session), "Collection")

    async def require_owned_collection(
        self, collection_id: str, user_id: str
    ) -> QuoteCollectionModel:
        """Return the collection if ``user_id`` owns it, else raise NOT_FOUND."""
        return await self.require_owned(collection_id, user_id)
