"""Hotel service -- lookups, paginated search, and partner upserts."""

import asyncio
from typing import Any

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.core.exceptions import RecordNotFoundError
from hotel_api.lib.pagination import Filters, SortConfig
from hotel_api.models.hotel import Hotel
from hotel_api.services.pagination import full_text_match, paginate

HOTEL_SORT = SortConfig(
    default_sort="hotel_id",
    columns=("hotel_id", "hotel_name", "country", "city", "rating", "stars"),
)


async def get_hotel(session: AsyncSession, hotel_id: int, *, timeout: float | None = None) -> Hotel:
    """Return a single hotel.

    Raises:
        RecordNotFoundError: If ``hotel_id`` is not positive or no such hotel exists.
    """
    if hotel_id <= 0:
        raise RecordNotFoundError("hotel", hotel_id)

    async with asyncio.timeout(timeout):
        result = await session.execute(select(Hotel).where(Hotel.hotel_id == hotel_id))
    hotel = result.scalar_one_or_none()
    if hotel is None:
        raise RecordNotFoundError("hotel", hotel_id)
    return hotel


async def list_hotels(
    session: AsyncSession,
    search: str,
    filters: Filters,
    *,
    timeout: float | None = None,
) -> tuple[list[Hotel], int]:
    """Return one page of hotels matching ``search`` and the total match count.

    The count is taken with ``count(*) OVER()`` in the same query, so a
    page past the end reports a total of zero.

    Args:
        session: Database session.
        search: Full-text search terms; empty matches every hotel.
        filters: Validated paging and sort values.
        timeout: Optional bound on query time in seconds.

    Returns:
        Tuple of (hotels on the page, total matching hotels).
    """
    query = select(func.count().over().label("total_records"), Hotel)
    if search:
        query = query.where(full_text_match(Hotel.fts, search))
    query = paginate(query, Hotel.__table__, filters, Hotel.hotel_id.asc())

    async with asyncio.timeout(timeout):
        result = await session.execute(query)
    rows = result.all()

    total = rows[0].total_records if rows else 0
    hotels = [row.Hotel for row in rows]
    logger.debug(f"Listed {len(hotels)} of {total} hotels (search={search!r}, sort={filters.sort})")
    return hotels, total


async def upsert_hotel(session: AsyncSession, values: dict[str, Any]) -> None:
    """Insert a hotel or update every non-key column of the existing row.

    Args:
        session: Database session.
        values: Column values keyed by column name; must include ``hotel_id``.
    """
    stmt = pg_insert(Hotel).values(**values)
    update_columns = {col: stmt.excluded[col] for col in values if col != "hotel_id"}
    update_columns["updated_at"] = func.now()
    stmt = stmt.on_conflict_do_update(index_elements=["hotel_id"], set_=update_columns)
    await session.execute(stmt)
    await session.commit()
    logger.debug(f"Upserted hotel {values['hotel_id']}")
