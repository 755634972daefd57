"""CLI commands for syncing hotels and reviews from the partner API."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

sync_app = typer.Typer()


@sync_app.command("run")
def run(
    input_file: Annotated[
        Path,
        typer.Option("--input", help="File of comma-separated partner hotel IDs", exists=True, dir_okay=False),
    ],
    interval: Annotated[
        int | None,
        typer.Option("--interval", help="Minutes between sync passes (defaults to SYNC_INTERVAL_MINUTES)", min=1),
    ] = None,
    once: Annotated[bool, typer.Option("--once", help="Run a single pass and exit")] = False,
) -> None:
    """Sync the listed hotels and their reviews into the database."""
    asyncio.run(_run_impl(input_file, interval, once))


async def _run_impl(input_file: Path, interval: int | None, once: bool) -> None:
    """Async implementation of the run command."""
    from hotel_api.core.config import get_settings
    from hotel_api.core.database import dispose_engine, get_session_factory, init_engine, ping
    from hotel_api.lib.partner import PartnerClient
    from hotel_api.services.sync_service import read_hotel_ids, run_sync, sync_loop

    settings = get_settings()
    if not settings.partner_api_url or not settings.partner_api_key:
        typer.echo("PARTNER_API_URL and PARTNER_API_KEY must be set", err=True)
        raise typer.Exit(code=1)

    hotel_ids = read_hotel_ids(input_file)
    if not hotel_ids:
        typer.echo(f"No hotel IDs found in {input_file}", err=True)
        raise typer.Exit(code=1)

    init_engine(
        settings.database_url,
        echo=False,
        schema=settings.database_schema,
        max_open_conns=settings.db_max_open_conns,
        max_idle_time=settings.db_max_idle_time_seconds,
    )

    try:
        await ping()
        logger.info("Database connection established")
        async with PartnerClient(
            settings.partner_api_url,
            settings.partner_api_key,
            timeout=settings.partner_timeout,
            max_attempts=settings.sync_max_attempts,
        ) as client:
            factory = get_session_factory()
            if once:
                report = await run_sync(factory, client, hotel_ids)
                typer.echo(
                    f"Synced {report.hotels_synced} hotel(s) and {report.reviews_synced} review(s); "
                    f"{len(report.failed_ids)} hotel(s) failed"
                )
            else:
                await sync_loop(factory, client, hotel_ids, interval or settings.sync_interval_minutes)
    finally:
        await dispose_engine()
