"""
Shared FastAPI dependencies for the routes.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from devcamper.config.base import BaseAppSettings
from devcamper.db.manager import get_db
from devcamper.services import BootcampRepository, BootcampService, PhotoUploadService


def get_app_settings(request: Request) -> BaseAppSettings:
    """Settings the application was configured with."""
    return request.app.state.settings


def get_bootcamp_service(
    session: AsyncSession = Depends(get_db),
    settings: BaseAppSettings = Depends(get_app_settings),
) -> BootcampService:
    return BootcampService(BootcampRepository(session), settings)


def get_upload_service(
    settings: BaseAppSettings = Depends(get_app_settings),
) -> PhotoUploadService:
    return PhotoUploadService(settings)
