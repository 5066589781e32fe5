# expense_tracker/core/database.py
import logging
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base

from .config import Settings

logger = logging.getLogger(__name__)

# Base class for all models
Base = declarative_base()


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine described by ``settings.DATABASE_URL``."""
    engine_kwargs = {
        "echo": settings.SQL_ECHO,
        "future": True,
        "pool_pre_ping": True,
    }

    if not settings.is_sqlite:
        # Keep the pool small but responsive
        engine_kwargs.update({
            "pool_size": 5,
            "max_overflow": 5,
            "pool_timeout": 30,       # Seconds to wait for a free connection
            "pool_recycle": 300,      # Recycle connections after 5 minutes
        })

    logger.info(f"Creating database engine for {settings.DATABASE_URL.split('://')[0]}")
    return create_async_engine(settings.DATABASE_URL, **engine_kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    # Committed rows stay readable without a refresh round-trip
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )


async def create_db_and_tables(engine: AsyncEngine) -> None:
    # Import models so they register on Base.metadata
    from expense_tracker.models import category, transaction, budget  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# Dependency to get DB session with proper exception handling
async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    session_factory: Optional[async_sessionmaker] = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Application has no session factory configured")

    session = session_factory()
    try:
        # Yield the session to the caller
        yield session
    except Exception as e:
        # Anything left uncommitted is discarded
        logger.debug(f"Rolling back session after {type(e).__name__}")
        await session.rollback()
        raise
    finally:
        # Always close the session
        await session.close()
        logger.debug("Database session closed")
