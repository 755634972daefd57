"""``hotel-api`` command-line entry point.

Subcommands: ``serve`` runs the HTTP API, ``db`` manages migrations and
``sync`` pulls partner data.
"""

from typing import Annotated

import typer

from hotel_api.core.config import get_settings
from hotel_api.core.logging import setup_logging

app = typer.Typer(name="hotel-api", help="Hotel and review API", no_args_is_help=True)


@app.callback()
def _main_callback(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Override LOG_LEVEL for this invocation"),
    ] = None,
) -> None:
    settings = get_settings()
    setup_logging(log_level or settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Bind address")] = "0.0.0.0",  # noqa: S104
    port: Annotated[int, typer.Option(help="Bind port")] = 4000,
    reload: Annotated[bool, typer.Option("--reload", help="Restart on code changes")] = False,
    workers: Annotated[int, typer.Option(help="Worker processes (ignored with --reload)", min=1)] = 1,
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "hotel_api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        workers=None if reload else workers,
    )


def _register_subcommands() -> None:
    from hotel_api.cli.db_cmd import db_app
    from hotel_api.cli.sync_cmd import sync_app

    app.add_typer(db_app, name="db", help="Schema migrations")
    app.add_typer(sync_app, name="sync", help="Partner data sync")


_register_subcommands()
