"""
Database lifecycle and per-request session dependency.
"""

from typing import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

import devcamper.db.engine as db_engine
from devcamper.errors.exceptions import DBError
from devcamper.logging import ensure_logger


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The session is committed when the request handler succeeds and rolled back
    otherwise. Driver errors are wrapped in ``DBError``; everything else
    propagates unchanged.
    """
    log = ensure_logger(None, __name__)

    if db_engine.SessionLocal is None:
        raise DBError(message="Database not initialized")

    async with db_engine.SessionLocal() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            log.error(f"Database session error: {e}")
            raise DBError(message=str(e), details={"error": str(e)})
        except Exception:
            await session.rollback()
            raise
