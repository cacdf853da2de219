"""Tests for request body serialization."""

import json

import pytest
from pactverify.pact.models import Party
from pactverify.pact.serialization import camel_case, normalize_body, serialize_body


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Name", "name"),
        ("FirstName", "firstName"),
        ("URLValue", "urlValue"),
        ("ID", "id"),
        ("alreadyCamel", "alreadyCamel"),
        ("snake_case", "snake_case"),
        ("", ""),
    ],
)
def test_camel_case(name, expected):
    assert camel_case(name) == expected


def test_normalize_drops_null_entries_recursively():
    body = {"Name": "gizmo", "Colour": None, "Parts": [{"Id": 1, "Spare": None}]}

    assert normalize_body(body) == {"name": "gizmo", "parts": [{"id": 1}]}


def test_normalize_keeps_nulls_inside_arrays():
    assert normalize_body({"tags": [None, "a"]}) == {"tags": [None, "a"]}


def test_normalize_accepts_models():
    assert normalize_body(Party(name="Web")) == {"name": "Web"}


def test_serialize_body_is_compact_json():
    text = serialize_body({"Name": "gizmo", "count": 2})

    assert text == '{"name":"gizmo","count":2}'
    assert json.loads(text) == {"name": "gizmo", "count": 2}


def test_serialize_scalar_body():
    assert serialize_body("plain") == '"plain"'
