"""Alembic migration runner for the hotels/reviews schema.

The database URL and optional schema come from ``hotel_api`` settings, not
from ``alembic.ini``, so migrations always target the same database as the
API and sync job.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool, text
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

import hotel_api.models  # noqa: F401  registers Hotel and Review on Base.metadata
from hotel_api.core.config import get_settings
from hotel_api.models.base import Base

alembic_cfg = context.config
if alembic_cfg.config_file_name is not None:
    fileConfig(alembic_cfg.config_file_name)

_settings = get_settings()
DATABASE_URL = _settings.database_url
SCHEMA = _settings.database_schema


def _configure(**kwargs: object) -> None:
    if SCHEMA is not None:
        kwargs["version_table_schema"] = SCHEMA
    context.configure(target_metadata=Base.metadata, compare_type=True, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


def _migrate_offline() -> None:
    _configure(url=DATABASE_URL, literal_binds=True, dialect_opts={"paramstyle": "named"})


def _migrate_connection(connection: Connection) -> None:
    if SCHEMA is not None:
        connection.execute(text(f'SET search_path TO "{SCHEMA}", public'))
    _configure(connection=connection)


async def _migrate_online() -> None:
    section = alembic_cfg.get_section(alembic_cfg.config_ini_section, {})
    section["sqlalchemy.url"] = DATABASE_URL
    engine = async_engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            if SCHEMA is not None:
                await connection.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{SCHEMA}"'))
                await connection.commit()
            await connection.run_sync(_migrate_connection)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    _migrate_offline()
else:
    asyncio.run(_migrate_online())
