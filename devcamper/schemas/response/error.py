"""
Error response schema.
"""

from pydantic import Field

from devcamper.schemas.response.base import BaseResponse


class ErrorResponse(BaseResponse):
    """
    Schema for error responses.

    Attributes:
        success: Always false for error responses
        error: Error message
    """

    success: bool = Field(default=False, description="Always false for error responses")
    error: str = Field(..., description="Human-readable error message")
