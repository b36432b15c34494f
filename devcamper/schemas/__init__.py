"""
Common schemas for the DevCamper API.

This module provides the response envelopes and the bootcamp payload schemas.
"""

from devcamper.schemas.bootcamp import (
    CAREERS,
    BootcampCreate,
    BootcampUpdate,
)
from devcamper.schemas.response import (
    BaseResponse,
    DataResponse,
    ErrorResponse,
    ListResponse,
)

__all__ = [
    # Response schemas
    "BaseResponse",
    "DataResponse",
    "ErrorResponse",
    "ListResponse",
    # Bootcamp payloads
    "CAREERS",
    "BootcampCreate",
    "BootcampUpdate",
]
