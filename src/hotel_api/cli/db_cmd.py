"""``hotel-api db``: apply, roll back and inspect schema migrations."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from loguru import logger

if TYPE_CHECKING:
    from alembic.config import Config

db_app = typer.Typer(no_args_is_help=True)

ConfigOption = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to alembic.ini", dir_okay=False),
]


def _alembic_config(path: Path) -> "Config":
    from alembic.config import Config

    return Config(str(path))


@db_app.command()
def upgrade(
    revision: Annotated[str, typer.Argument(help="Target revision")] = "head",
    config: ConfigOption = Path("alembic.ini"),
) -> None:
    """Migrate the hotels/reviews schema forward to ``revision``."""
    from alembic import command

    logger.info(f"Migrating database up to {revision}")
    command.upgrade(_alembic_config(config), revision)
    logger.info("Migration complete")


@db_app.command()
def downgrade(
    revision: Annotated[str, typer.Argument(help="Target revision")] = "-1",
    config: ConfigOption = Path("alembic.ini"),
) -> None:
    """Roll the schema back to ``revision`` (one step by default)."""
    from alembic import command

    logger.warning(f"Rolling database back to {revision}")
    command.downgrade(_alembic_config(config), revision)
    logger.info("Rollback complete")


@db_app.command()
def current(config: ConfigOption = Path("alembic.ini")) -> None:
    """Print the revision the database is at."""
    from alembic import command

    command.current(_alembic_config(config), verbose=True)


@db_app.command()
def history(config: ConfigOption = Path("alembic.ini")) -> None:
    """List every known migration revision."""
    from alembic import command

    command.history(_alembic_config(config), verbose=True)
