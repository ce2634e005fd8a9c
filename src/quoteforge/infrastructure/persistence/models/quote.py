"""SQLAlchemy model for the quotes table."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from quoteforge.infrastructure.persistence.database import Base


class QuoteModel(Base):
    """SQLAlchemy model for the quotes table.

    ``user_id`` duplicates the owner of the parent collection. It is copied
    from the authenticated caller when the quote is created and never
    updated afterwards; no database constraint ties it to the collection.

    Attributes:
        id: Primary key (UUID string).
        collection_id: Foreign key to quote_collections.
        user_id: Owning user ID (denormalized).
        text: The quote itself.
        attributed_to: Optional attribution ("Karthik", "Astra", ...).
        mood: Optional mood tag ("inspiring", "calm", "funny").
        tags: Optional free-form tags string (comma-separated or JSON).
        language: Optional language code.
        is_favorite: Favorite flag.
        is_public: Public-visibility flag, stored only.
        created_at: Timestamp when the quote was created.
        updated_at: Timestamp when the quote was last updated.
    """

    __tablename__ = "quotes"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Quote ID (UUID)",
    )
    collection_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("quote_collections.id"),
        nullable=False,
        index=True,
        comment="Foreign key to quote_collections table",
    )
    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Owning user ID, copied from the creator",
    )
    text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    attributed_to: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    mood: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
    )
    tags: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    language: Mapped[str | None] = mapped_column(
        String(32),
        nullable=True,
    )
    is_favorite: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default="0",
    )
    is_public: Mapped[bool] = mapped_column(
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

    __table_args__ = (
        Index("ix_quotes_collection_user", "collection_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Quote(id={self.id}, collection_id={self.collection_id})>"
