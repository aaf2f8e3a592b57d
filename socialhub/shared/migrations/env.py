# pylint: skip-file
# ruff: noqa
"""
Alembic migration environment.

The database URL always comes from ``settings.DATABASE_URL``; alembic.ini
only carries logging configuration. Online migrations run through the same
async driver the application uses (asyncpg, or aiosqlite for local runs),
and SQLite gets batch mode so ALTER TABLE revisions work there too.

    alembic upgrade head              # apply
    alembic upgrade head --sql        # print SQL instead of running it
    alembic revision --autogenerate -m "add column"
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from socialhub.config.settings import settings

# Importing the package registers every table on Base.metadata
from socialhub.shared import models

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = models.Base.metadata


def _configure(**options) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        **options,
    )


def run_migrations_offline() -> None:
    """Emit SQL for the configured database without connecting to it."""
    _configure(
        url=settings.DATABASE_URL,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=settings.is_sqlite,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    _configure(
        connection=connection,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Connect with the application's async driver and apply migrations."""
    engine = create_async_engine(settings.DATABASE_URL, poolclass=pool.NullPool)

    async with engine.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
