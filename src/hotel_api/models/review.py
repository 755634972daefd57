"""Review model: guest reviews attached to a hotel."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Computed, DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import TSVECTOR
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_api.models.base import Base

if TYPE_CHECKING:
    from hotel_api.models.hotel import Hotel

REVIEW_FTS_EXPRESSION = (
    "to_tsvector('simple', coalesce(headline, '') || ' ' || coalesce(pros, '') || ' ' || coalesce(cons, ''))"
)


class Review(Base):
    """A single guest review.

    The partner API does not assign review IDs, so reviews are matched on
    ``(hotel_id, name, date, headline)`` when upserting.
    """

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hotel_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("hotels.hotel_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    average_score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    country: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    type: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    date: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    headline: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    language: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    pros: Mapped[str] = mapped_column(Text, nullable=False, default="")
    cons: Mapped[str] = mapped_column(Text, nullable=False, default="")
    source: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    fts: Mapped[str] = mapped_column(
        TSVECTOR,
        Computed(REVIEW_FTS_EXPRESSION, persisted=True),
        deferred=True,
    )

    hotel: Mapped["Hotel"] = relationship(back_populates="reviews", lazy="noload")

    __table_args__ = (
        UniqueConstraint("hotel_id", "name", "date", "headline", name="uq_reviews_identity"),
        Index("ix_reviews_fts", "fts", postgresql_using="gin"),
    )
