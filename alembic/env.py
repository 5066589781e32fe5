# alembic/env.py
import asyncio
from logging.config import fileConfig
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from alembic import context

from expense_tracker.core.config import settings
from expense_tracker.core.database import Base
from expense_tracker.models import (  # noqa: F401
    category,
    transaction,
    budget,
)

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# DATABASE_URL from the environment wins over alembic.ini
database_url = str(settings.DATABASE_URL)
config.set_main_option("sqlalchemy.url", database_url)

target_metadata = Base.metadata


def configure_context(**kwargs) -> None:
    # SQLite cannot ALTER constraints in place
    context.configure(
        target_metadata=target_metadata,
        render_as_batch=settings.is_sqlite,
        **kwargs,
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    configure_context(connection=connection)


async def run_async_migrations() -> None:
    """Run migrations through the same async driver the app uses."""
    connectable = create_async_engine(database_url, poolclass=pool.NullPool)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    # Emit SQL to stdout instead of connecting
    configure_context(
        url=database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
else:
    asyncio.run(run_async_migrations())
