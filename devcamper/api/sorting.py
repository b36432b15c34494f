"""
Sorting utilities for list endpoints.

The ``sort`` parameter is a comma-separated list of field names; a leading
``-`` sorts that field in descending order. The first field is the primary
sort key.
"""

from enum import Enum
from typing import Any, List, Mapping, NamedTuple

from devcamper.api.projection import split_fields


class SortDirection(str, Enum):
    """
    Sort direction enum.

    Attributes:
        ASC: Ascending order
        DESC: Descending order
    """

    ASC = "asc"
    DESC = "desc"


class SortField(NamedTuple):
    """
    A field to sort by and its direction.

    Attributes:
        field: Field name to sort by
        direction: Sort direction
    """

    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, token: str) -> "SortField":
        """
        Parse a sort token.

        Examples:
            >>> SortField.parse("name")
            SortField(field='name', direction=<SortDirection.ASC: 'asc'>)
            >>> SortField.parse("-rating")
            SortField(field='rating', direction=<SortDirection.DESC: 'desc'>)
        """
        token = token.strip()
        if token.startswith("-"):
            return cls(token[1:].strip(), SortDirection.DESC)
        return cls(token, SortDirection.ASC)

    def __str__(self) -> str:
        prefix = "-" if self.direction == SortDirection.DESC else ""
        return f"{prefix}{self.field}"


SortSpec = List[SortField]

DEFAULT_SORT: SortSpec = [SortField("createdAt", SortDirection.DESC)]


def build_sort(raw_params: Mapping[str, Any]) -> SortSpec:
    """
    Build the sort specification from the ``sort`` parameter.

    Args:
        raw_params: Parsed query parameters

    Returns:
        Ordered sort fields, newest first (``-createdAt``) when none are given
    """
    fields = [SortField.parse(token) for token in split_fields(raw_params.get("sort"))]
    fields = [field for field in fields if field.field]
    return fields or list(DEFAULT_SORT)
