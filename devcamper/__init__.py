"""
DevCamper - bootcamp directory API.

Bootcamp CRUD endpoints with query-string filtering, field selection,
sorting and pagination, built on FastAPI and async SQLAlchemy.

Usage:
    from devcamper import create_app

    app = create_app()
"""

__version__ = "1.0.0"

from devcamper.api import QueryBuilder
from devcamper.config import BaseAppSettings, get_settings
from devcamper.errors import AppError
from devcamper.factory import configure_app, create_app
from devcamper.logging import get_logger
