"""Quote service.

Every operation first confirms that the caller owns the collection named in
the request, then touches only quotes inside that collection.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from quoteforge.core.exceptions import NotFoundError, ValidationFailedError
from quoteforge.core.logging import get_logger
from quoteforge.domain.services.ownership_guard import CollectionOwnershipGuard
from quoteforge.infrastructure.persistence.models import QuoteModel
from quoteforge.infrastructure.persistence.repositories import QuoteRepository

logger = get_logger(__name__)

QUOTE_PATCHABLE_FIELDS = frozenset(
    {"text", "attributed_to", "mood", "tags", "language", "is_favorite", "is_public"}
)


class QuoteService:
    """Service for quote business logic."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the service.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session
        self.repository = QuoteRepository(session)
        self.guard = CollectionOwnershipGuard(session)

    async def create_quote(
        self,
        user_id: str,
        collection_id: str,
        text: str,
        attributed_to: str | None = None,
        mood: str | None = None,
        tags: str | None = None,
        language: str | None = None,
        is_favorite: bool = False,
        is_public: bool = False,
    ) -> QuoteModel:
        """Create a quote in an owned collection.

        The quote's ``user_id`` is taken from the caller. This is the only
        place it is ever written.

        Raises:
            NotFoundError: If the collection is missing or not owned.
        """
        await self.guard.require_owned_collection(collection_id, user_id)

        now = datetime.now(timezone.utc)
        quote = QuoteModel(
            id=str(uuid.uuid4()),
            collection_id=collection_id,
            user_id=user_id,
            text=text,
            attributed_to=attributed_to,
            mood=mood,
            tags=tags,
            language=language,
            is_favorite=is_favorite,
            is_public=is_public,
            created_at=now,
            updated_at=now,
        )
        await self.repository.create(quote)

        logger.info(
            "Quote created",
            quote_id=quote.id,
            collection_id=collection_id,
            user_id=user_id,
        )
        return quote

    async def update_quote(
        self,
        user_id: str,
        collection_id: str,
        quote_id: str,
        changes: dict[str, Any],
    ) -> QuoteModel:
        """Apply a partial update to a quote in an owned collection.

        Args:
            user_id: The caller.
            collection_id: The collection the quote is claimed to be in.
            quote_id: The quote to update.
            changes: Field values keyed by model attribute name.

        Returns:
            The updated quote model.

        Raises:
            ValidationFailedError: If ``changes`` holds no patchable field.
            NotFoundError: If the collection is missing or not owned, or the
                quote is not in that collection.
        """
        values = {k: v for k, v in changes.items() if k in QUOTE_PATCHABLE_FIELDS}
        if not values:
            raise ValidationFailedError("At least one field must be provided to update.")

        await self.guard.require_owned_collection(collection_id, user_id)

        existing = await self.repository.get_in_collection(quote_id, collection_id)
        if existing is None:
            raise NotFoundError("Quote not found.")

        values["updated_at"] = datetime.now(timezone.utc)
        quote = await self.repository.update_in_collection(
            quote_id, collection_id, user_id, values
        )
        if quote is None:
            raise NotFoundError("Quote not found.")

        logger.info(
            "Quote updated",
            quote_id=quote_id,
            collection_id=collection_id,
            user_id=user_id,
            fields=sorted(values),
        )
        return quote

    async def delete_quote(self, user_id: str, collection_id: str, quote_id: str) -> None:
        """Delete a quote addressed by (quote_id, collection_id).

        Raises:
            NotFoundError: If the collection is missing or not owned, or no
                quote with that ID lives in it.
        """
        await self.guard.require_owned_collection(collection_id, user_id)

        deleted = await self.repository.delete_in_collection(quote_id, collection_id, user_id)
        if not deleted:
            raise NotFoundError("Quote not found.")

        logger.info(
            "Quote deleted",
            quote_id=quote_id,
            collection_id=collection_id,
            user_id=user_id,
        )

    async def list_quotes(
        self,
        user_id: str,
        collection_id: str,
        favorites_only: bool = False,
        include_public: bool = False,
    ) -> Sequence[QuoteModel]:
        """List the caller's quotes in an owned collection.

        ``include_public`` is accepted for a future listing of other users'
        public quotes. An owner already sees all of their own quotes, so it
        does not change the result here.

        Raises:
            NotFoundError: If the collection is missing or not owned.
        """
        await self.guard.require_owned_collection(collection_id, user_id)
        return await self.repository.list_in_collection(
            collection_id, user_id, favorites_only=favorites_only
        )
