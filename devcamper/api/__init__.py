"""
List-query utilities for the DevCamper API.

This module provides the query-string parser and the filtering, field
selection, sorting and pagination helpers used by list endpoints.
"""

from devcamper.api.filtering import FilterOperator, build_filter, translate_operators
from devcamper.api.pagination import PageLink, Pagination, build_pagination, parse_int
from devcamper.api.params import RawParams, get_raw_params, parse_query_params
from devcamper.api.projection import build_projection
from devcamper.api.query import ListQuery, QueryBuilder
from devcamper.api.sorting import SortDirection, SortField, build_sort

__all__ = [
    "FilterOperator",
    "ListQuery",
    "PageLink",
    "Pagination",
    "QueryBuilder",
    "RawParams",
    "SortDirection",
    "SortField",
    "build_filter",
    "build_pagination",
    "build_projection",
    "build_sort",
    "get_raw_params",
    "parse_int",
    "parse_query_params",
    "translate_operators",
]
