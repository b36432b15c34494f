"""
Application services.
"""

from devcamper.services.bootcamps import BootcampRepository, BootcampService
from devcamper.services.uploads import PhotoUploadService

__all__ = ["BootcampRepository", "BootcampService", "PhotoUploadService"]
