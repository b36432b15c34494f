"""
Bootcamp photo uploads.

Files are validated (image content type, size limit) and written to
``FILE_UPLOAD_PATH`` as ``photo_<id><ext>``.
"""

from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from devcamper.config.base import BaseAppSettings
from devcamper.errors.exceptions import AppError, BadRequestError
from devcamper.logging import Logger, ensure_logger


def photo_filename(bootcamp_id: str, original_name: Optional[str]) -> str:
    """``photo_<id>`` with the original file's extension."""
    return f"photo_{bootcamp_id}{Path(original_name or '').suffix}"


class PhotoUploadService:
    """
    Validate and store uploaded bootcamp photos.

    Args:
        settings: Application settings providing the size limit and target
            directory
        logger: Optional logger
    """

    def __init__(self, settings: BaseAppSettings, logger: Optional[Logger] = None):
        self.settings = settings
        self.logger = ensure_logger(logger, __name__, settings)

    async def save(self, bootcamp_id: str, upload: Optional[UploadFile]) -> str:
        """
        Store an uploaded photo for a bootcamp.

        Args:
            bootcamp_id: Id of the bootcamp the photo belongs to
            upload: The uploaded file, None when the request carried no file

        Returns:
            Stored file name

        Raises:
            BadRequestError: Missing file, non-image content or file too large
            AppError: The file could not be written
        """
        if upload is None:
            raise BadRequestError("Please upload a file")

        if not (upload.content_type or "").startswith("image"):
            raise BadRequestError("Please upload an image file")

        max_size = self.settings.MAX_FILE_UPLOAD
        content = await upload.read()
        if len(content) > max_size:
            raise BadRequestError(f"Please upload an image less than {max_size}")

        filename = photo_filename(bootcamp_id, upload.filename)
        target = Path(self.settings.FILE_UPLOAD_PATH) / filename
        try:
            await run_in_threadpool(self._write, target, content)
        except OSError as e:
            self.logger.error(f"Problem with file upload to {target}: {e}")
            raise AppError("Problem with file upload", details={"error": str(e)})

        self.logger.info(f"Stored photo {filename} ({len(content)} bytes)")
        return filename

    @staticmethod
    def _write(target: Path, content: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
