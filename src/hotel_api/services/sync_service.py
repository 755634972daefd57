"""Partner sync service -- pulls hotels and reviews and upserts them.

A sync pass walks a fixed list of partner hotel IDs.  Failures are
isolated: a hotel whose fetch or upsert fails is skipped, and a review
that fails to upsert does not stop the remaining reviews.
"""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hotel_api.lib.partner import PartnerAPIError, PartnerClient
from hotel_api.services.hotel_service import upsert_hotel
from hotel_api.services.review_service import upsert_review


@dataclass
class SyncReport:
    """Outcome of one sync pass."""

    hotels_synced: int = 0
    reviews_synced: int = 0
    reviews_failed: int = 0
    failed_ids: list[str] = field(default_factory=list)


def read_hotel_ids(path: Path) -> list[str]:
    """Read comma-separated partner hotel IDs from ``path``.

    Whitespace around each ID is stripped and empty entries are skipped.
    """
    content = path.read_text(encoding="utf-8")
    return [part.strip() for part in content.split(",") if part.strip()]


async def sync_hotel(
    session: AsyncSession,
    client: PartnerClient,
    hotel_id: str,
    report: SyncReport,
) -> bool:
    """Fetch one hotel and its reviews and upsert them.

    Returns:
        True if the hotel row was written, False if it was skipped.
    """
    try:
        hotel = await client.fetch_hotel(hotel_id)
    except PartnerAPIError as e:
        logger.error(f"Error fetching hotel data for ID {hotel_id}: {e}")
        return False

    try:
        reviews = await client.fetch_reviews(hotel_id)
    except PartnerAPIError as e:
        logger.error(f"Error fetching review data for ID {hotel_id}: {e}")
        return False

    try:
        await upsert_hotel(session, hotel.to_row())
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"Error inserting hotel data for ID {hotel_id}: {e}")
        return False

    for review in reviews:
        try:
            await upsert_review(session, hotel.hotel_id, review.to_row())
        except SQLAlchemyError as e:
            await session.rollback()
            report.reviews_failed += 1
            logger.error(f"Error inserting review data for ID {hotel_id}: {e}")
            continue
        report.reviews_synced += 1

    return True


async def run_sync(
    session_factory: async_sessionmaker[AsyncSession],
    client: PartnerClient,
    hotel_ids: list[str],
) -> SyncReport:
    """Run one sync pass over ``hotel_ids``.

    Args:
        session_factory: Factory for the pass's database session.
        client: Partner API client.
        hotel_ids: Partner hotel IDs to sync, in order.

    Returns:
        Counts of synced rows and the IDs that were skipped.
    """
    logger.info(f"Starting sync of {len(hotel_ids)} hotel(s)")
    report = SyncReport()

    async with session_factory() as session:
        for hotel_id in hotel_ids:
            if await sync_hotel(session, client, hotel_id, report):
                report.hotels_synced += 1
            else:
                report.failed_ids.append(hotel_id)

    logger.info(
        "Sync finished: {} hotel(s), {} review(s), {} failed hotel(s), {} failed review(s)",
        report.hotels_synced,
        report.reviews_synced,
        len(report.failed_ids),
        report.reviews_failed,
    )
    return report


async def sync_loop(
    session_factory: async_sessionmaker[AsyncSession],
    client: PartnerClient,
    hotel_ids: list[str],
    interval_minutes: int,
) -> None:
    """Run a sync pass immediately and then every ``interval_minutes``.

    Runs until cancelled; an unexpected error in one pass is logged and
    the next pass still runs.
    """
    logger.info("Partner sync loop started (interval={}m)", interval_minutes)

    while True:
        try:
            await run_sync(session_factory, client, hotel_ids)
        except Exception:
            logger.exception("Partner sync pass error")

        try:
            await asyncio.sleep(interval_minutes * 60)
        except asyncio.CancelledError:
            logger.info("Partner sync loop cancelled")
            break
