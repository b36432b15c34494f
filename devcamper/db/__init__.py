"""
Database integration module: public API

Features:
- Async SQLAlchemy integration (SQLite+aiosqlite or PostgreSQL+asyncpg)
- Repository translating document-style filter predicates to SQL
- FastAPI dependency for session access

Limitations:
- Only async SQLAlchemy is supported (no sync engine/session)
- No migration helpers; tables are created on startup when configured
"""

from devcamper.db.base import Base, BaseModel, metadata
from devcamper.db.engine import init_db, shutdown_db
from devcamper.db.manager import get_db
from devcamper.db.repository import BaseRepository

__all__ = [
    "init_db",
    "shutdown_db",
    "get_db",
    "BaseRepository",
    "Base",
    "BaseModel",
    "metadata",
]
