"""Quote collection service.

Handles creation, partial updates and listing of a user's collections.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from quoteforge.core.exceptions import NotFoundError, ValidationFailedError
from quoteforge.core.logging import get_logger
from quoteforge.domain.services.ownership_guard import CollectionOwnershipGuard
from quoteforge.infrastructure.persistence.models import QuoteCollectionModel
from quoteforge.infrastructure.persistence.repositories import QuoteCollectionRepository

logger = get_logger(__name__)

COLLECTION_PATCHABLE_FIELDS = frozenset({"name", "description", "icon", "is_default"})


class QuoteCollectionService:
    """Service for quote collection business logic."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the service.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session
        self.repository = QuoteCollectionRepository(session)
        self.guard = CollectionOwnershipGuard(session)

    async def create_collection(
        self,
        user_id: str,
        name: str,
        description: str | None = None,
        icon: str | None = None,
        is_default: bool = False,
    ) -> QuoteCollectionModel:
        """Create a collection owned by ``user_id``.

        Names are not checked for uniqueness.

        Args:
            user_id: The owning user.
            name: Display name.
            description: Optional description.
            icon: Optional icon reference.
            is_default: Whether this is the user's default collection.

        Returns:
            The created collection model.
        """
        now = datetime.now(timezone.utc)
        collection = QuoteCollectionModel(
            id=str(uuid.uuid4()),
            user_id=user_id,
            name=name,
            description=description,
            icon=icon,
            is_default=is_default,
            created_at=now,
            updated_at=now,
        )
        await self.repository.create(collection)

        logger.info("Collection created", collection_id=collection.id, user_id=user_id)
        return collection

    async def update_collection(
        self, user_id: str, collection_id: str, changes: dict[str, Any]
    ) -> QuoteCollectionModel:
        """Apply a partial update to an owned collection.

        Only keys present in ``changes`` are written; ``updated_at`` is
        always refreshed.

        Args:
            user_id: The caller.
            collection_id: The collection to update.
            changes: Field values keyed by model attribute name.

        Returns:
            The updated collection model.

        Raises:
            ValidationFailedError: If ``changes`` holds no patchable field.
            NotFoundError: If the collection is missing or not owned.
        """
        values = {k: v for k, v in changes.items() if k in COLLECTION_PATCHABLE_FIELDS}
        if not values:
            raise ValidationFailedError("At least one field must be provided to update.")

        await self.guard.require_owned_collection(collection_id, user_id)

        values["updated_at"] = datetime.now(timezone.utc)
        collection = await self.repository.update_owned(collection_id, user_id, values)
        if collection is None:
            raise NotFoundError("Collection not found.")

        logger.info(
            "Collection updated",
            collection_id=collection_id,
            user_id=user_id,
            fields=sorted(values),
        )
        return collection

    async def list_collections(self, user_id: str) -> Sequence[QuoteCollectionModel]:
        """Return every collection owned by ``user_id``."""
        return await self.repository.list_by_user(user_id)
