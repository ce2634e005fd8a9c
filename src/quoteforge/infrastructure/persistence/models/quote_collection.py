"""SQLAlchemy model for the quote_collections table.

A quote collection is a named grouping of quotes owned by one user
("Motivation", "Leadership", ...).
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from quoteforge.infrastructure.persistence.database import Base


class QuoteCollectionModel(Base):
    """SQLAlchemy model for the quote_collections table.

    Attributes:
        id: Primary key (UUID string).
        user_id: Identifier of the owning user.
        name: Display name. Duplicates are allowed.
        description: Optional free-text description.
        icon: Optional icon reference.
        is_default: Marks the user's default collection. Advisory only,
            not unique per user.
        created_at: Timestamp when the collection was created.
        updated_at: Timestamp when the collection was last updated.
    """

    __tablename__ = "quote_collections"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Collection ID (UUID)",
    )
    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Owning user ID",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name, e.g. 'Startup Motivation'",
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    icon: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    is_default: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default="0",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<QuoteCollection(id={self.id}, name={self.name})>"
