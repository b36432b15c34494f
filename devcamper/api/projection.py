"""
Field selection utilities for list endpoints.
"""

from typing import Any, Mapping, Set

ProjectionSpec = Set[str]


def split_fields(value: Any) -> list:
    """
    Split a comma-separated parameter into trimmed, non-empty tokens.

    Repeated parameters (lists) are joined with commas first.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        value = ",".join(str(item) for item in value)
    elif isinstance(value, Mapping):
        return []
    return [token.strip() for token in str(value).split(",") if token.strip()]


def build_projection(raw_params: Mapping[str, Any]) -> ProjectionSpec:
    """
    Build the set of fields to return from the ``select`` parameter.

    An empty set means no restriction.

    Example:
        ```python
        build_projection({"select": "name, email"})  # {"name", "email"}
        ```
    """
    return set(split_fields(raw_params.get("select")))
