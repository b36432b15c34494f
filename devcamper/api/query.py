"""
List-query construction.

``QueryBuilder`` bundles the filtering, projection, sorting and pagination
helpers for one request's parameters.

Example:
    ```python
    builder = QueryBuilder(raw_params)
    query = builder.list_query()
    items = await repository.find(query)
    total = await repository.count()
    pagination = builder.build_pagination(total)
    ```
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from devcamper.api.filtering import FilterPredicate, build_filter
from devcamper.api.pagination import Pagination, build_pagination, get_page_window
from devcamper.api.projection import ProjectionSpec, build_projection
from devcamper.api.sorting import SortSpec, build_sort


@dataclass
class ListQuery:
    """
    Ready-to-execute description of a list query.

    Attributes:
        filter: Filter predicate in storage operator convention
        projection: Fields to return, empty for all
        sort: Ordered sort fields
        skip: Number of items to skip
        limit: Maximum number of items to return
    """

    filter: FilterPredicate = field(default_factory=dict)
    projection: ProjectionSpec = field(default_factory=set)
    sort: SortSpec = field(default_factory=list)
    skip: int = 0
    limit: int = 0


class QueryBuilder:
    """
    Translate one request's raw parameters into query parts.

    All methods are pure and never raise; malformed input degrades to
    defaults.
    """

    def __init__(self, raw_params: Mapping[str, Any]):
        self.raw_params = raw_params

    def build_filter(self) -> FilterPredicate:
        return build_filter(self.raw_params)

    def build_projection(self) -> ProjectionSpec:
        return build_projection(self.raw_params)

    def build_sort(self) -> SortSpec:
        return build_sort(self.raw_params)

    def build_pagination(self, total: int) -> Pagination:
        return build_pagination(self.raw_params, total)

    @property
    def page(self) -> int:
        return get_page_window(self.raw_params)[0]

    @property
    def limit(self) -> int:
        return get_page_window(self.raw_params)[1]

    def list_query(self) -> ListQuery:
        """Bundle filter, projection, sort and page window."""
        page, limit = get_page_window(self.raw_params)
        return ListQuery(
            filter=self.build_filter(),
            projection=self.build_projection(),
            sort=self.build_sort(),
            skip=(page - 1) * limit,
            limit=limit,
        )
