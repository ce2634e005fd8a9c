"""Repository for quote collection operations.

Every read and write that targets a single collection is filtered by both
the collection ID and the owning user ID.
"""

from typing import Any, Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quoteforge.infrastructure.persistence.models import QuoteCollectionModel


class QuoteCollectionRepository:
    """Repository for quote collection database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, collection: QuoteCollectionModel) -> QuoteCollectionModel:
        """Insert a new collection.

        Args:
            collection: The collection model to insert.

        Returns:
            The inserted collection model.
        """
        self.session.add(collection)
        await self.session.flush()
        return collection

    async def get_owned(self, collection_id: str, user_id: str) -> QuoteCollectionModel | None:
        """Get a collection by ID if it belongs to the given user.

        Args:
            collection_id: The collection ID.
            user_id: The expected owner.

        Returns:
            The collection model, or None if it does not exist or is owned
            by someone else.
        """
        result = await self.session.execute(
            select(QuoteCollectionModel)
            .where(
                QuoteCollectionModel.id == collection_id,
                QuoteCollectionModel.user_id == user_id,
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: str) -> Sequence[QuoteCollectionModel]:
        """List every collection owned by a user, oldest first."""
        result = await self.session.execute(
            select(QuoteCollectionModel)
            .where(QuoteCollectionModel.user_id == user_id)
            .order_by(QuoteCollectionModel.created_at, QuoteCollectionModel.id)
        )
        return result.scalars().all()

    async def update_owned(
        self, collection_id: str, user_id: str, values: dict[str, Any]
    ) -> QuoteCollectionModel | None:
        """Apply a partial update to an owned collection.

        The owner filter is part of the UPDATE statement itself, so a
        collection that changed hands after an earlier ownership check is
        left untouched.

        Args:
            collection_id: The collection ID.
            user_id: The expected owner.
            values: Column values to set.

        Returns:
            The updated collection model, or None if no row matched.
        """
        result = await self.session.execute(
            update(QuoteCollectionModel)
            .where(
                QuoteCollectionModel.id == collection_id,
                QuoteCollectionModel.user_id == user_id,
            )
            .values(**values)
        )
        if result.rowcount == 0:
            return None
        return await self.get_owned(collection_id, user_id)
