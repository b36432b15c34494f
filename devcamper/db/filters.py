"""
Translation of document-style filter predicates into SQLAlchemy conditions.

A predicate maps field names to literals (equality) or to operator mappings
such as ``{"$gte": "5", "$lt": "10"}``. Operand strings are coerced to the
column's Python type before comparison.
"""

import operator
from datetime import date, datetime
from typing import Any, Callable, Dict, List

from sqlalchemy import JSON, and_, false, literal_column, select
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.sql.functions import FunctionElement

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


def _in(column, values):
    return column.in_(values)


def _not_in(column, values):
    return column.not_in(values)


OPERATORS: Dict[str, Callable[[Any, Any], ColumnElement]] = {
    "$eq": operator.eq,
    "$ne": operator.ne,
    "$gt": operator.gt,
    "$gte": operator.ge,
    "$lt": operator.lt,
    "$lte": operator.le,
    "$in": _in,
    "$nin": _not_in,
}

LIST_OPERATORS = {"$in", "$nin"}


def coerce_value(column, value: Any) -> Any:
    """
    Convert a raw operand to the column's Python type.

    Values that cannot be converted are returned unchanged and compared as
    given.
    """
    if not isinstance(value, str):
        return value
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return value

    if python_type is bool:
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        return value
    if python_type in (int, float):
        try:
            return python_type(value)
        except ValueError:
            try:
                return float(value)
            except ValueError:
                return value
    if python_type in (datetime, date):
        try:
            return python_type.fromisoformat(value)
        except ValueError:
            return value
    return value


def as_list(value: Any) -> List[Any]:
    """Operands of ``$in``/``$nin``: a list, or a comma-separated string."""
    if isinstance(value, (list, tuple, set)):
        return list(value)
    if isinstance(value, str):
        return [item.strip() for item in value.split(",")]
    return [value]


def build_condition(column, value: Any) -> ColumnElement:
    """
    Build the SQL condition for one predicate entry.

    Unknown operators (anything that is not a ``$`` storage token listed in
    ``OPERATORS``) make the entry match nothing, the way a document store
    treats an embedded document compared to a scalar.
    """
    if isinstance(value, dict):
        if not value:
            return false()
        conditions = []
        for op, operand in value.items():
            compare = OPERATORS.get(op)
            if compare is None:
                return false()
            if op in LIST_OPERATORS:
                operand = [coerce_value(column, item) for item in as_list(operand)]
            elif isinstance(operand, (list, dict)):
                return false()
            else:
                operand = coerce_value(column, operand)
            conditions.append(compare(column, operand))
        return conditions[0] if len(conditions) == 1 else and_(*conditions)

    if isinstance(value, (list, tuple)):
        return column.in_([coerce_value(column, item) for item in value])

    return column == coerce_value(column, value)


class json_array_elements(FunctionElement):
    """Table-valued function yielding the elements of a JSON array column."""

    name = "json_array_elements"
    inherit_cache = True


@compiles(json_array_elements)
def _compile_json_each(element, compiler, **kw):
    return f"json_each({compiler.process(element.clauses, **kw)})"


@compiles(json_array_elements, "postgresql")
def _compile_json_array_elements_text(element, compiler, **kw):
    return f"json_array_elements_text({compiler.process(element.clauses, **kw)})"


# Negative operators on arrays hold when no element matches the positive one
NEGATED_OPERATORS = {"$ne": "$eq", "$nin": "$in"}


def is_array_column(column) -> bool:
    """JSON columns hold arrays (``careers``) and are matched per element."""
    return isinstance(column.type, JSON)


def _any_element(column, value: Any) -> ColumnElement:
    elements = json_array_elements(column).table_valued("value")
    return (
        select(literal_column("1"))
        .select_from(elements)
        .where(build_condition(elements.c.value, value))
        .exists()
    )


def build_array_condition(column, value: Any) -> ColumnElement:
    """
    Build the SQL condition for a predicate entry on an array column.

    An array matches when any of its elements satisfies the condition, so
    ``careers=Business`` matches bootcamps offering Business among others.
    ``$ne`` and ``$nin`` match when no element equals the operand.
    """
    if not isinstance(value, dict):
        return _any_element(column, value)
    if not value:
        return false()

    conditions = []
    for op, operand in value.items():
        if op in NEGATED_OPERATORS:
            conditions.append(~_any_element(column, {NEGATED_OPERATORS[op]: operand}))
        else:
            conditions.append(_any_element(column, {op: operand}))
    return conditions[0] if len(conditions) == 1 else and_(*conditions)
