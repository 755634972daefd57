"""Hotel model: property records pulled from the partner API."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Computed, Float, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import TSVECTOR
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_api.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from hotel_api.models.review import Review

HOTEL_FTS_EXPRESSION = (
    "to_tsvector('simple', coalesce(hotel_name, '') || ' ' || coalesce(city, '') || ' ' "
    "|| coalesce(country, '') || ' ' || coalesce(description, ''))"
)


class Hotel(Base, TimestampMixin):
    """A hotel property.

    ``hotel_id`` is assigned by the partner API and used as-is, so the
    sync job can upsert on it.
    """

    __tablename__ = "hotels"

    hotel_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    main_image_th: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    hotel_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    # Address
    address: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    city: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    state: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    country: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False, default="")

    stars: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    child_allowed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    pets_allowed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    fts: Mapped[str] = mapped_column(
        TSVECTOR,
        Computed(HOTEL_FTS_EXPRESSION, persisted=True),
        deferred=True,
    )

    reviews: Mapped[list["Review"]] = relationship(
        back_populates="hotel",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="noload",
    )

    __table_args__ = (Index("ix_hotels_fts", "fts", postgresql_using="gin"),)
