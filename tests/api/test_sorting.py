"""
Tests for the sorting module.
"""

from devcamper.api.sorting import DEFAULT_SORT, SortDirection, SortField, build_sort


class TestSortField:
    """Tests for the SortField tuple."""

    def test_parse_ascending(self):
        assert SortField.parse("name") == SortField("name", SortDirection.ASC)

    def test_parse_descending(self):
        assert SortField.parse("-rating") == SortField("rating", SortDirection.DESC)

    def test_parse_strips_whitespace(self):
        assert SortField.parse("  -rating ") == ("rating", SortDirection.DESC)

    def test_default_direction(self):
        assert SortField("name").direction == SortDirection.ASC

    def test_str(self):
        assert str(SortField("name")) == "name"
        assert str(SortField("createdAt", SortDirection.DESC)) == "-createdAt"


class TestBuildSort:
    """Tests for build_sort."""

    def test_default(self):
        assert build_sort({}) == [("createdAt", SortDirection.DESC)]

    def test_default_is_not_shared(self):
        build_sort({}).append(SortField("name"))
        assert DEFAULT_SORT == [("createdAt", SortDirection.DESC)]

    def test_multiple_fields_keep_order(self):
        assert build_sort({"sort": "name,-rating"}) == [
            ("name", SortDirection.ASC),
            ("rating", SortDirection.DESC),
        ]

    def test_direction_values(self):
        fields = build_sort({"sort": "-averageCost"})
        assert fields[0].direction == "desc"

    def test_empty_tokens_are_dropped(self):
        assert build_sort({"sort": "name,,-"}) == [("name", SortDirection.ASC)]

    def test_blank_sort_falls_back_to_default(self):
        assert build_sort({"sort": ""}) == [("createdAt", SortDirection.DESC)]

    def test_repeated_parameter(self):
        assert build_sort({"sort": ["name", "-rating"]}) == [
            ("name", SortDirection.ASC),
            ("rating", SortDirection.DESC),
        ]
