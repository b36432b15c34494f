"""
Query-string parsing for list endpoints.

Turns URL query pairs into RawParams, supporting the bracket syntax clients
use for comparison operators::

    ?price[gt]=100&careers[in]=Business&careers[in]=Other&select=name

becomes::

    {"price": {"gt": "100"}, "careers": {"in": ["Business", "Other"]},
     "select": "name"}
"""

import re
from typing import Any, Dict, Iterable, List, Tuple, Union

from fastapi import Request

RawValue = Union[str, List[Any], Dict[str, Any]]
RawParams = Dict[str, RawValue]

_KEY_PATTERN = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])+)$")
_SEGMENT_PATTERN = re.compile(r"\[([^\[\]]*)\]")


def split_key(key: str) -> List[str]:
    """
    Split ``a[b][c]`` into ``["a", "b", "c"]``.

    Keys without well-formed brackets are returned whole. An empty segment
    (``a[]``) is kept as ``""`` and means "append".
    """
    match = _KEY_PATTERN.match(key)
    if not match:
        return [key]
    return [match.group(1)] + _SEGMENT_PATTERN.findall(match.group(2))


def _assign(target: Dict[str, Any], path: List[str], value: str) -> None:
    head, rest = path[0], path[1:]

    if not rest:
        if head in target:
            existing = target[head]
            if isinstance(existing, list):
                existing.append(value)
            elif isinstance(existing, dict):
                # A literal cannot replace an operator mapping
                return
            else:
                target[head] = [existing, value]
        else:
            target[head] = value
        return

    if rest == [""]:
        existing = target.get(head)
        if existing is None:
            target[head] = [value]
        elif isinstance(existing, list):
            existing.append(value)
        elif not isinstance(existing, dict):
            target[head] = [existing, value]
        return

    child = target.setdefault(head, {})
    if not isinstance(child, dict):
        # First writer wins when a literal already occupies the key
        return
    _assign(child, rest, value)


def parse_query_params(items: Iterable[Tuple[str, str]]) -> RawParams:
    """
    Build RawParams from ``(key, value)`` pairs in URL order.

    Args:
        items: Query pairs, e.g. ``request.query_params.multi_items()``

    Returns:
        Mapping of parameter names to strings, lists or nested mappings
    """
    params: RawParams = {}
    for key, value in items:
        if not key:
            continue
        _assign(params, split_key(key), value)
    return params


def get_raw_params(request: Request) -> RawParams:
    """
    FastAPI dependency exposing the request's query string as RawParams.
    """
    return parse_query_params(request.query_params.multi_items())
