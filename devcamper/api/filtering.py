"""
Filtering utilities for list endpoints.

This module turns free-form query parameters into a filter predicate in the
storage layer's operator convention, e.g. ``price[gt]=100`` becomes
``{"price": {"$gt": "100"}}``.
"""

from enum import Enum
from typing import Any, Dict, Mapping

# Control parameters that never take part in filtering
RESERVED_PARAMS = ("select", "sort", "page", "limit")

OPERATOR_PREFIX = "$"

FilterPredicate = Dict[str, Any]


class FilterOperator(str, Enum):
    """
    Filter operators for field comparisons.

    Only the comparison operators are rewritten to storage tokens. ``eq`` is
    listed for completeness; equality is normally expressed as a plain
    ``field=value`` parameter and an explicit ``field[eq]`` is passed through
    untouched like any other unknown operator.

    Attributes:
        EQ: Equal to
        GT: Greater than
        GTE: Greater than or equal to
        LT: Less than
        LTE: Less than or equal to
        IN: In a list of values
    """

    EQ = "eq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    IN = "in"

    @property
    def token(self) -> str:
        """Storage-layer token for this operator."""
        return f"{OPERATOR_PREFIX}{self.value}"


COMPARISON_OPERATORS = frozenset(
    op.value
    for op in (
        FilterOperator.GT,
        FilterOperator.GTE,
        FilterOperator.LT,
        FilterOperator.LTE,
        FilterOperator.IN,
    )
)


def translate_operators(value: Any) -> Any:
    """
    Rewrite comparison operator keys of a nested mapping to storage tokens.

    Only mapping keys are rewritten, at any depth. Values, lists and keys that
    merely contain an operator name (``gtx``, ``Gt``) are left alone.

    Args:
        value: A filter value (literal, list or nested mapping)

    Returns:
        The value with ``gt``/``gte``/``lt``/``lte``/``in`` keys prefixed
    """
    if not isinstance(value, Mapping):
        return value
    translated = {}
    for key, inner in value.items():
        if key in COMPARISON_OPERATORS:
            key = FilterOperator(key).token
        translated[key] = translate_operators(inner)
    return translated


def build_filter(raw_params: Mapping[str, Any]) -> FilterPredicate:
    """
    Build a filter predicate from raw query parameters.

    Reserved control parameters are dropped. Literal values become equality
    tests; nested mappings have their operator keys translated.

    Args:
        raw_params: Parsed query parameters

    Returns:
        Filter predicate ready for the storage layer

    Example:
        ```python
        build_filter({"price": {"gt": "100"}, "housing": "true", "page": "2"})
        # {"price": {"$gt": "100"}, "housing": "true"}
        ```
    """
    return {
        field: translate_operators(value)
        for field, value in raw_params.items()
        if field not in RESERVED_PARAMS
    }
