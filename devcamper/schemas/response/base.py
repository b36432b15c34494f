"""
Base response schema.

Every response envelope carries a ``success`` flag.
"""

from pydantic import BaseModel, Field


class BaseResponse(BaseModel):
    """
    Base schema for all API responses.

    Attributes:
        success: Whether the request was successful
    """

    success: bool = Field(
        default=True, description="Indicates if the request was successful"
    )
