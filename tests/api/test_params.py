"""
Tests for query-string parsing.
"""

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from devcamper.api.params import get_raw_params, parse_query_params, split_key


class TestSplitKey:
    """Tests for split_key."""

    def test_plain_key(self):
        assert split_key("price") == ["price"]

    def test_bracket_key(self):
        assert split_key("price[gt]") == ["price", "gt"]

    def test_nested_brackets(self):
        assert split_key("location[city][in]") == ["location", "city", "in"]

    def test_append_key(self):
        assert split_key("careers[]") == ["careers", ""]

    def test_malformed_brackets_are_kept_whole(self):
        assert split_key("price[gt") == ["price[gt"]
        assert split_key("[gt]") == ["[gt]"]


class TestParseQueryParams:
    """Tests for parse_query_params."""

    def test_flat(self):
        assert parse_query_params([("select", "name"), ("page", "2")]) == {
            "select": "name",
            "page": "2",
        }

    def test_operator(self):
        assert parse_query_params([("price[gt]", "100")]) == {"price": {"gt": "100"}}

    def test_multiple_operators_on_one_field(self):
        params = parse_query_params([("price[gte]", "1"), ("price[lt]", "9")])
        assert params == {"price": {"gte": "1", "lt": "9"}}

    def test_repeated_key_becomes_list(self):
        params = parse_query_params([("careers[in]", "Business"), ("careers[in]", "Other")])
        assert params == {"careers": {"in": ["Business", "Other"]}}

    def test_repeated_literal(self):
        assert parse_query_params([("a", "1"), ("a", "2"), ("a", "3")]) == {
            "a": ["1", "2", "3"]
        }

    def test_append_syntax(self):
        assert parse_query_params([("a[]", "1"), ("a[]", "2")]) == {"a": ["1", "2"]}

    def test_literal_then_bracket_keeps_literal(self):
        assert parse_query_params([("price", "5"), ("price[gt]", "1")]) == {
            "price": "5"
        }

    def test_bracket_then_literal_keeps_mapping(self):
        assert parse_query_params([("price[gt]", "1"), ("price", "5")]) == {
            "price": {"gt": "1"}
        }

    def test_empty_key_is_ignored(self):
        assert parse_query_params([("", "x")]) == {}


def test_get_raw_params_dependency():
    app = FastAPI()

    @app.get("/params")
    def read_params(raw=Depends(get_raw_params)):
        return raw

    client = TestClient(app)
    response = client.get("/params?averageCost[lte]=10000&select=name,slug&x=1&x=2")

    assert response.json() == {
        "averageCost": {"lte": "10000"},
        "select": "name,slug",
        "x": ["1", "2"],
    }
