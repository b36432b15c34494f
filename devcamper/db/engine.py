"""
Database engine and session management.
"""

from typing import Optional

from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from devcamper.config.base import BaseAppSettings
from devcamper.db.base import metadata
from devcamper.logging import Logger, ensure_logger

# Module-level engine and session factory
engine: Optional[AsyncEngine] = None
SessionLocal: Optional[async_sessionmaker[AsyncSession]] = None


async def init_db(settings: BaseAppSettings, logger: Optional[Logger] = None) -> None:
    """
    Initialize the database engine and session factory.

    In-memory SQLite databases share a single connection so every session
    sees the same data. Tables are created when ``DB_CREATE_TABLES`` is set.

    Args:
        settings: Application settings
        logger: Optional logger for database operations
    """
    global engine, SessionLocal

    # Importing the models registers their tables on the metadata
    import devcamper.models  # noqa: F401

    log = ensure_logger(logger, __name__, settings)

    log.debug(f"Creating database engine with URL: {settings.DATABASE_URL}")
    url = make_url(settings.DATABASE_URL)
    engine_kwargs = {
        "echo": settings.DB_ECHO,
    }
    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_size"] = settings.DB_POOL_SIZE

    engine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)
    SessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False)

    if settings.DB_CREATE_TABLES:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        log.debug("Database tables created")

    log.debug("Database engine and session factory initialized")


async def shutdown_db(logger: Optional[Logger] = None) -> None:
    """
    Dispose of the database engine.

    Args:
        logger: Optional logger for database operations
    """
    global engine, SessionLocal

    log = ensure_logger(logger, __name__)

    if engine:
        log.debug("Disposing database engine")
        await engine.dispose()
        engine = None
        SessionLocal = None
        log.debug("Database engine disposed")
