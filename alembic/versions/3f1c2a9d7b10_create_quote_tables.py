"""create_quote_tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 09:12:44.208311

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create quote_collections and quotes tables."""
    op.create_table(
        "quote_collections",
        sa.Column("id", sa.String(length=36), nullable=False, comment="Collection ID (UUID)"),
        sa.Column("user_id", sa.String(length=255), nullable=False, comment="Owning user ID"),
        sa.Column(
            "name",
            sa.String(length=255),
            nullable=False,
            comment="Display name, e.g. 'Startup Motivation'",
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(length=255), nullable=True),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("quote_collections", schema=None) as batch_op:
        batch_op.create_index(
            batch_op.f("ix_quote_collections_user_id"), ["user_id"], unique=False
        )

    op.create_table(
        "quotes",
        sa.Column("id", sa.String(length=36), nullable=False, comment="Quote ID (UUID)"),
        sa.Column(
            "collection_id",
            sa.String(length=36),
            nullable=False,
            comment="Foreign key to quote_collections table",
        ),
        sa.Column(
            "user_id",
            sa.String(length=255),
            nullable=False,
            comment="Owning user ID, copied from the creator",
        ),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("attributed_to", sa.String(length=255), nullable=True),
        sa.Column("mood", sa.String(length=64), nullable=True),
        sa.Column("tags", sa.Text(), nullable=True),
        sa.Column("language", sa.String(length=32), nullable=True),
        sa.Column("is_favorite", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
        sa.ForeignKeyConstraint(["collection_id"], ["quote_collections.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("quotes", schema=None) as batch_op:
        batch_op.create_index(
            batch_op.f("ix_quotes_collection_id"), ["collection_id"], unique=False
        )
        batch_op.create_index(batch_op.f("ix_quotes_user_id"), ["user_id"], unique=False)
        batch_op.create_index(
            "ix_quotes_collection_user", ["collection_id", "user_id"], unique=False
        )


def downgrade() -> None:
    """Drop quotes and quote_collections tables."""
    with op.batch_alter_table("quotes", schema=None) as batch_op:
        batch_op.drop_index("ix_quotes_collection_user")
        batch_op.drop_index(batch_op.f("ix_quotes_user_id"))
        batch_op.drop_index(batch_op.f("ix_quotes_collection_id"))
    op.drop_table("quotes")

    with op.batch_alter_table("quote_collections", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_quote_collections_user_id"))
    op.drop_table("quote_collections")
