"""
Data response schema for single-object responses.
"""

from typing import Generic, TypeVar

from pydantic import Field

from devcamper.schemas.response.base import BaseResponse

T = TypeVar("T")


class DataResponse(BaseResponse, Generic[T]):
    """
    Schema for single-object API responses.

    Attributes:
        success: Whether the request was successful
        data: The response payload (required)
    """

    data: T = Field(..., description="Response payload (required)")
