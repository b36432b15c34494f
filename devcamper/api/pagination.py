"""
Pagination utilities for list endpoints.

Offset-based pagination driven by the ``page`` and ``limit`` query
parameters, with ``next``/``prev`` links computed against a total count.
"""

import re
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, model_serializer

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 25

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_int(value: Any, default: int) -> int:
    """
    Parse the leading integer of a query parameter.

    Mirrors the usual ``parseInt(value, 10) || default`` idiom: a numeric
    prefix is accepted (``"10abc"`` -> 10), anything else as well as zero
    yields the default. Negative values are returned as-is.

    Args:
        value: Raw parameter value (string, list of strings or None)
        default: Value to use when parsing fails

    Returns:
        Parsed integer or the default
    """
    if isinstance(value, (list, tuple)):
        value = ",".join(str(item) for item in value)
    if isinstance(value, bool) or value is None or isinstance(value, Mapping):
        return default
    if isinstance(value, int):
        return value or default
    match = _LEADING_INT.match(str(value))
    if not match:
        return default
    return int(match.group(1)) or default


class PageLink(BaseModel):
    """Reference to a neighbouring page."""

    page: int
    limit: int


class Pagination(BaseModel):
    """
    Pagination window for a list response.

    Attributes:
        page: Current page number (1-indexed)
        limit: Maximum items per page
        total: Count the window was computed against
        next: Link to the next page, present when more items follow
        prev: Link to the previous page, present when items precede
    """

    page: int = Field(default=DEFAULT_PAGE, description="Current page number")
    limit: int = Field(default=DEFAULT_LIMIT, description="Maximum items per page")
    total: int = Field(default=0, description="Total number of items")
    next: Optional[PageLink] = Field(default=None, description="Next page")
    prev: Optional[PageLink] = Field(default=None, description="Previous page")

    @property
    def start_index(self) -> int:
        """Number of items to skip."""
        return (self.page - 1) * self.limit

    @property
    def end_index(self) -> int:
        """Index one past the last item of this page."""
        return self.page * self.limit

    @model_serializer(mode="wrap")
    def omit_missing_links(self, handler) -> Dict[str, Any]:
        data = handler(self)
        for key in ("next", "prev"):
            if data.get(key) is None:
                data.pop(key, None)
        return data


def get_page_window(raw_params: Mapping[str, Any]) -> tuple:
    """
    Read ``page`` and ``limit`` from raw query parameters.

    Returns:
        Tuple of (page, limit) with defaults applied
    """
    page = parse_int(raw_params.get("page"), DEFAULT_PAGE)
    limit = parse_int(raw_params.get("limit"), DEFAULT_LIMIT)
    return page, limit


def build_pagination(raw_params: Mapping[str, Any], total: int) -> Pagination:
    """
    Build pagination metadata for a page of results.

    ``next`` is set when the end of this page is strictly below ``total``;
    ``prev`` is set when this page starts after the first item.

    Args:
        raw_params: Parsed query parameters
        total: Number of items the window is computed against

    Returns:
        Pagination metadata

    Example:
        ```python
        build_pagination({"page": "2", "limit": "10"}, total=25)
        # page=2 limit=10 next={page: 3, limit: 10} prev={page: 1, limit: 10}
        ```
    """
    page, limit = get_page_window(raw_params)
    pagination = Pagination(page=page, limit=limit, total=total)

    if pagination.end_index < total:
        pagination.next = PageLink(page=page + 1, limit=limit)

    if pagination.start_index > 0:
        pagination.prev = PageLink(page=page - 1, limit=limit)

    return pagination
