"""
List response schema for collections of objects.
"""

from typing import Generic, List, TypeVar

from pydantic import Field

from devcamper.api.pagination import Pagination
from devcamper.schemas.response.base import BaseResponse

T = TypeVar("T")


class ListResponse(BaseResponse, Generic[T]):
    """
    Schema for list/collection API responses.

    Attributes:
        success: Whether the request was successful
        count: Number of items in ``data``
        pagination: Page window with next/previous links
        data: The list of response items
    """

    count: int = Field(default=0, description="Number of items on this page")
    pagination: Pagination = Field(..., description="Pagination window")
    data: List[T] = Field(default_factory=list, description="List of items")

    @classmethod
    def from_page(cls, items: List[T], pagination: Pagination) -> "ListResponse[T]":
        """Build a list response; ``count`` is the size of the returned page."""
        return cls(count=len(items), pagination=pagination, data=items)
