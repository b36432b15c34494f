"""
Response schemas for API endpoints.
"""

from devcamper.schemas.response.base import BaseResponse
from devcamper.schemas.response.data import DataResponse
from devcamper.schemas.response.error import ErrorResponse
from devcamper.schemas.response.list import ListResponse

__all__ = [
    "BaseResponse",
    "DataResponse",
    "ErrorResponse",
    "ListResponse",
]
