"""Repository for quote operations.

Quotes are always addressed through their (id, collection_id) pair, never
by ID alone.
"""

from typing import Any, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quoteforge.infrastructure.persistence.models import QuoteModel


class QuoteRepository:
    """Repository for quote database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, quote: QuoteModel) -> QuoteModel:
        """Insert a new quote.

        Args:
            quote: The quote model to insert.

        Returns:
            The inserted quote model.
        """
        self.session.add(quote)
        await self.session.flush()
        return quote

    async def get_in_collection(self, quote_id: str, collection_id: str) -> QuoteModel | None:
        """Get a quote by ID, only if it lives in the given collection.

        Args:
            quote_id: The quote ID.
            collection_id: The collection the caller claims it belongs to.

        Returns:
            The quote model if found, None otherwise.
        """
        result = await self.session.execute(
            select(QuoteModel)
            .where(
                QuoteModel.id == quote_id,
                QuoteModel.collection_id == collection_id,
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_in_collection(
        self, collection_id: str, user_id: str, favorites_only: bool = False
    ) -> Sequence[QuoteModel]:
        """List a user's quotes in one collection, oldest first.

        Args:
            collection_id: The collection ID.
            user_id: The owning user.
            favorites_only: Restrict the result to favorite quotes.

        Returns:
            The matching quote models.
        """
        stmt = select(QuoteModel).where(
            QuoteModel.collection_id == collection_id,
            QuoteModel.user_id == user_id,
        )
        if favorites_only:
            stmt = stmt.where(QuoteModel.is_favorite.is_(True))

        result = await self.session.execute(
            stmt.order_by(QuoteModel.created_at, QuoteModel.id)
        )
        return result.scalars().all()

    async def update_in_collection(
        self,
        quote_id: str,
        collection_id: str,
        user_id: str,
        values: dict[str, Any],
    ) -> QuoteModel | None:
        """Apply a partial update to a quote.

        Args:
            quote_id: The quote ID.
            collection_id: The collection the quote must belong to.
            user_id: The owner the quote must belong to.
            values: Column values to set.

        Returns:
            The updated quote model, or None if no row matched.
        """
        result = await self.session.execute(
            update(QuoteModel)
            .where(
                QuoteModel.id == quote_id,
                QuoteModel.collection_id == collection_id,
                QuoteModel.user_id == user_id,
            )
            .values(**values)
        )
        if result.rowcount == 0:
            return None
        return await self.get_in_collection(quote_id, collection_id)

    async def delete_in_collection(self, quote_id: str, collection_id: str, user_id: str) -> bool:
        """Delete a quote addressed by (id, collection_id).

        Returns:
            True if a row was deleted, False otherwise.
        """
        result = await self.session.execute(
            delete(QuoteModel).where(
                QuoteModel.id == quote_id,
                QuoteModel.collection_id == collection_id,
                QuoteModel.user_id == user_id,
            )
        )
        return result.rowcount > 0
