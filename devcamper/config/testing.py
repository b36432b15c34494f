"""
Testing environment specific settings.

This module contains settings that are specific to the testing environment,
such as the in-memory database.
"""

from .base import BaseAppSettings


class TestingSettings(BaseAppSettings):
    """
    Settings class for testing environment.

    Uses an in-memory SQLite database whose tables are created on startup.

    Attributes:
        DEBUG: Set to True for detailed test output
        DATABASE_URL: In-memory SQLite connection string for testing
        DB_CREATE_TABLES: Always create the schema
    """

    __test__ = False

    DEBUG: bool = True
    DATABASE_URL: str = "sqlite+aiosqlite:///:memory:"
    DB_CREATE_TABLES: bool = True
