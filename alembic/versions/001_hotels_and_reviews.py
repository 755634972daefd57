"""Initial migration: hotels and reviews tables with full-text search columns.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import TSVECTOR

from hotel_api.models.hotel import HOTEL_FTS_EXPRESSION
from hotel_api.models.review import REVIEW_FTS_EXPRESSION

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "hotels",
        sa.Column("hotel_id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("main_image_th", sa.String(500), nullable=False, server_default=""),
        sa.Column("hotel_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("phone", sa.String(50), nullable=False, server_default=""),
        sa.Column("email", sa.String(255), nullable=False, server_default=""),
        sa.Column("address", sa.String(255), nullable=False, server_default=""),
        sa.Column("city", sa.String(100), nullable=False, server_default=""),
        sa.Column("state", sa.String(100), nullable=False, server_default=""),
        sa.Column("country", sa.String(100), nullable=False, server_default=""),
        sa.Column("postal_code", sa.String(20), nullable=False, server_default=""),
        sa.Column("stars", sa.Integer, nullable=False, server_default="0"),
        sa.Column("rating", sa.Float, nullable=False, server_default="0"),
        sa.Column("review_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("child_allowed", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("pets_allowed", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("fts", TSVECTOR, sa.Computed(HOTEL_FTS_EXPRESSION, persisted=True)),
    )
    op.create_index("ix_hotels_fts", "hotels", ["fts"], postgresql_using="gin")

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "hotel_id",
            sa.Integer,
            sa.ForeignKey("hotels.hotel_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("average_score", sa.Integer, nullable=False, server_default="0"),
        sa.Column("country", sa.String(100), nullable=False, server_default=""),
        sa.Column("type", sa.String(100), nullable=False, server_default=""),
        sa.Column("name", sa.String(255), nullable=False, server_default=""),
        sa.Column("date", sa.String(50), nullable=False, server_default=""),
        sa.Column("headline", sa.String(500), nullable=False, server_default=""),
        sa.Column("language", sa.String(20), nullable=False, server_default=""),
        sa.Column("pros", sa.Text, nullable=False, server_default=""),
        sa.Column("cons", sa.Text, nullable=False, server_default=""),
        sa.Column("source", sa.String(100), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("fts", TSVECTOR, sa.Computed(REVIEW_FTS_EXPRESSION, persisted=True)),
        sa.UniqueConstraint("hotel_id", "name", "date", "headline", name="uq_reviews_identity"),
    )
    op.create_index("ix_reviews_hotel_id", "reviews", ["hotel_id"])
    op.create_index("ix_reviews_fts", "reviews", ["fts"], postgresql_using="gin")


def downgrade() -> None:
    op.drop_table("reviews")
    op.drop_table("hotels")
