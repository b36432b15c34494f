"""
Configuration module for DevCamper.

This module provides:
- BaseAppSettings: The base class for application settings, supporting environment variable loading.
- Environment-specific settings (development, testing, production).
- get_settings: Factory for loading the correct settings class based on APP_ENV.

Example environment variables (to be placed in a .env file or the environment):

# Application
APP_NAME="DevCamper"
APP_ENV="development"  # Options: development, testing, production
VERSION="1.0.0"
DEBUG=true

# Database configuration
DATABASE_URL="sqlite+aiosqlite:///./devcamper.db"
DB_ECHO=false
DB_POOL_SIZE=5
DB_CREATE_TABLES=true

# Uploads
MAX_FILE_UPLOAD=1000000
FILE_UPLOAD_PATH="./public/uploads"

# Listing behaviour
PAGINATION_STRICT=false
PAGINATION_TOTAL_FILTERED=false

# Logging
LOG_LEVEL="INFO"
LOG_JSON_FORMAT=false
"""

from .base import BaseAppSettings
from .development import DevelopmentSettings
from .production import ProductionSettings
from .settings import get_settings
from .testing import TestingSettings

__all__ = [
    "BaseAppSettings",
    "DevelopmentSettings",
    "ProductionSettings",
    "TestingSettings",
    "get_settings",
]
