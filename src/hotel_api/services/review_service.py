"""Review service -- lookups and paginated search within a hotel, plus upserts."""

import asyncio
from typing import Any

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.core.exceptions import RecordNotFoundError
from hotel_api.lib.pagination import Filters, SortConfig
from hotel_api.models.review import Review
from hotel_api.services.pagination import full_text_match, paginate

REVIEW_SORT = SortConfig(
    default_sort="id",
    columns=("id", "average_score", "country", "name", "date", "language"),
)

_IDENTITY_COLUMNS = ("hotel_id", "name", "date", "headline")


async def get_review(
    session: AsyncSession,
    hotel_id: int,
    review_id: int,
    *,
    timeout: float | None = None,
) -> Review:
    """Return one review belonging to ``hotel_id``.

    Raises:
        RecordNotFoundError: If the IDs are not positive or the review does
            not exist for that hotel.
    """
    if hotel_id <= 0 or review_id <= 0:
        raise RecordNotFoundError("review", review_id)

    async with asyncio.timeout(timeout):
        result = await session.execute(
            select(Review).where(Review.id == review_id, Review.hotel_id == hotel_id),
        )
    review = result.scalar_one_or_none()
    if review is None:
        raise RecordNotFoundError("review", review_id)
    return review


async def list_reviews(
    session: AsyncSession,
    hotel_id: int,
    search: str,
    filters: Filters,
    *,
    timeout: float | None = None,
) -> tuple[list[Review], int]:
    """Return one page of a hotel's reviews matching ``search`` and the total count.

    Args:
        session: Database session.
        hotel_id: Hotel whose reviews are listed.
        search: Full-text search terms; empty matches every review.
        filters: Validated paging and sort values.
        timeout: Optional bound on query time in seconds.

    Returns:
        Tuple of (reviews on the page, total matching reviews).
    """
    query = select(func.count().over().label("total_records"), Review).where(Review.hotel_id == hotel_id)
    if search:
        query = query.where(full_text_match(Review.fts, search))
    query = paginate(query, Review.__table__, filters, Review.id.asc())

    async with asyncio.timeout(timeout):
        result = await session.execute(query)
    rows = result.all()

    total = rows[0].total_records if rows else 0
    return [row.Review for row in rows], total


async def upsert_review(session: AsyncSession, hotel_id: int, values: dict[str, Any]) -> None:
    """Insert a review for ``hotel_id`` or refresh the matching existing one.

    Reviews are matched on (hotel_id, name, date, headline).

    Args:
        session: Database session.
        hotel_id: Owning hotel.
        values: Review column values, without ``id`` or ``hotel_id``.
    """
    row = {**values, "hotel_id": hotel_id}
    stmt = pg_insert(Review).values(**row)
    stmt = stmt.on_conflict_do_update(
        index_elements=list(_IDENTITY_COLUMNS),
        set_={col: stmt.excluded[col] for col in row if col not in _IDENTITY_COLUMNS},
    )
    await session.execute(stmt)
    await session.commit()
    logger.debug(f"Upserted review {row.get('headline')!r} for hotel {hotel_id}")
