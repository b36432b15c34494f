"""
Tests for field selection.
"""

from devcamper.api.projection import build_projection, split_fields


def test_select_fields():
    assert build_projection({"select": "name,email"}) == {"name", "email"}


def test_select_trims_and_drops_empty_tokens():
    assert build_projection({"select": " name , ,description,"}) == {
        "name",
        "description",
    }


def test_no_select_means_all_fields():
    assert build_projection({}) == set()
    assert build_projection({"name": "x"}) == set()


def test_repeated_select():
    assert build_projection({"select": ["name", "email,phone"]}) == {
        "name",
        "email",
        "phone",
    }


def test_split_fields_ignores_mappings():
    assert split_fields({"gt": "1"}) == []
    assert split_fields(None) == []
