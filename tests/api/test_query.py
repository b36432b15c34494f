"""
Tests for QueryBuilder.
"""

from devcamper.api.pagination import PageLink
from devcamper.api.query import ListQuery, QueryBuilder
from devcamper.api.sorting import SortDirection


def test_list_query_bundles_all_parts():
    raw = {
        "averageCost": {"lte": "10000"},
        "housing": "true",
        "select": "name,averageCost",
        "sort": "-averageRating,name",
        "page": "3",
        "limit": "5",
    }
    query = QueryBuilder(raw).list_query()

    assert query == ListQuery(
        filter={"averageCost": {"$lte": "10000"}, "housing": "true"},
        projection={"name", "averageCost"},
        sort=[("averageRating", SortDirection.DESC), ("name", SortDirection.ASC)],
        skip=10,
        limit=5,
    )


def test_defaults():
    builder = QueryBuilder({})
    query = builder.list_query()

    assert query.filter == {}
    assert query.projection == set()
    assert query.sort == [("createdAt", SortDirection.DESC)]
    assert query.skip == 0
    assert query.limit == 25
    assert builder.page == 1
    assert builder.limit == 25


def test_build_pagination_uses_total():
    builder = QueryBuilder({"page": "2", "limit": "10"})
    pagination = builder.build_pagination(25)

    assert pagination.next == PageLink(page=3, limit=10)
    assert pagination.prev == PageLink(page=1, limit=10)


def test_individual_operations_match_module_functions():
    builder = QueryBuilder({"price": {"gt": "10"}, "select": "name"})

    assert builder.build_filter() == {"price": {"$gt": "10"}}
    assert builder.build_projection() == {"name"}
    assert builder.build_sort() == [("createdAt", SortDirection.DESC)]


def test_malformed_input_never_raises():
    builder = QueryBuilder({"page": {"gt": "1"}, "limit": ["x"], "sort": {"a": "b"}})
    query = builder.list_query()

    assert query.skip == 0
    assert query.limit == 25
    assert query.sort == [("createdAt", SortDirection.DESC)]
