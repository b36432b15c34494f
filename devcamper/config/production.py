"""
Production environment specific settings.
"""

from .base import BaseAppSettings


class ProductionSettings(BaseAppSettings):
    """
    Settings class for production environment.

    Disables debug mode and leaves schema management to migrations.

    Attributes:
        DEBUG: Always False in production
        DB_CREATE_TABLES: Tables are expected to exist already
    """

    DEBUG: bool = False
    DB_CREATE_TABLES: bool = False
