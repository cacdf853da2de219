"""Tests for the default Pact v1 response validator."""

import pytest
from pactverify.core.errors import ResponseMismatchError
from pactverify.pact.models import ProviderResponse
from pactverify.pact.validator import Mismatch, ProviderResponseValidator


@pytest.fixture
def validator():
    return ProviderResponseValidator()


def mismatches_for(validator, expected, actual) -> list[Mismatch]:
    with pytest.raises(ResponseMismatchError) as exc_info:
        validator.validate(ProviderResponse(**expected), ProviderResponse(**actual))
    return exc_info.value.mismatches


class TestStatus:
    def test_matching_status_passes(self, validator):
        validator.validate(ProviderResponse(status=200), ProviderResponse(status=200))

    def test_status_differs(self, validator):
        mismatches = mismatches_for(validator, {"status": 200}, {"status": 404})

        assert mismatches == [Mismatch("status", "status code differs", 200, 404)]


class TestHeaders:
    def test_header_names_match_case_insensitively(self, validator):
        validator.validate(
            ProviderResponse(status=200, headers={"content-type": "application/json"}),
            ProviderResponse(status=200, headers={"Content-Type": "application/json"}),
        )

    def test_whitespace_after_commas_ignored(self, validator):
        validator.validate(
            ProviderResponse(status=200, headers={"Allow": "GET,POST"}),
            ProviderResponse(status=200, headers={"Allow": "GET, POST"}),
        )

    def test_missing_header_when_actual_has_none(self, validator):
        mismatches = mismatches_for(
            validator,
            {"status": 200, "headers": {"X-Request-Id": "abc"}},
            {"status": 200},
        )

        assert [m.location for m in mismatches] == ["headers.X-Request-Id"]
        assert mismatches[0].reason == "header missing"

    def test_extra_actual_headers_allowed(self, validator):
        validator.validate(
            ProviderResponse(status=200, headers={}),
            ProviderResponse(status=200, headers={"Date": "today"}),
        )


class TestBody:
    def test_unrecorded_body_not_checked(self, validator):
        validator.validate(
            ProviderResponse(status=200),
            ProviderResponse(status=200, body={"anything": True}),
        )

    def test_extra_keys_allowed(self, validator):
        validator.validate(
            ProviderResponse(status=200, body={"name": "gizmo"}),
            ProviderResponse(status=200, body={"name": "gizmo", "id": 1}),
        )

    def test_missing_key(self, validator):
        mismatches = mismatches_for(
            validator,
            {"status": 200, "body": {"name": "gizmo", "size": 3}},
            {"status": 200, "body": {"name": "gizmo"}},
        )

        assert mismatches == [Mismatch("$.size", "key missing", 3, None)]

    def test_nested_location(self, validator):
        mismatches = mismatches_for(
            validator,
            {"status": 200, "body": {"items": [{"name": "a"}, {"name": "b"}]}},
            {"status": 200, "body": {"items": [{"name": "a"}, {"name": "c"}]}},
        )

        assert [m.location for m in mismatches] == ["$.items[1].name"]

    def test_array_length_must_match(self, validator):
        mismatches = mismatches_for(
            validator,
            {"status": 200, "body": [1, 2]},
            {"status": 200, "body": [1, 2, 3]},
        )

        assert mismatches[0].reason == "array length differs"

    def test_bool_is_not_a_number(self, validator):
        mismatches = mismatches_for(
            validator,
            {"status": 200, "body": {"active": True}},
            {"status": 200, "body": {"active": 1}},
        )

        assert mismatches[0].location == "$.active"

    def test_int_and_float_compare_by_value(self, validator):
        validator.validate(
            ProviderResponse(status=200, body={"price": 10}),
            ProviderResponse(status=200, body={"price": 10.0}),
        )

    def test_type_mismatch(self, validator):
        mismatches = mismatches_for(
            validator,
            {"status": 200, "body": {"tags": ["a"]}},
            {"status": 200, "body": {"tags": "a"}},
        )

        assert mismatches[0].reason == "expected an array"

    def test_recorded_null_requires_null(self, validator):
        mismatches = mismatches_for(
            validator,
            {"status": 200, "body": {"deleted_at": None}},
            {"status": 200, "body": {"deleted_at": "2024-01-01"}},
        )

        assert mismatches[0].location == "$.deleted_at"


def test_all_mismatches_reported_together(validator):
    mismatches = mismatches_for(
        validator,
        {"status": 200, "headers": {"X-Version": "2"}, "body": {"name": "gizmo"}},
        {"status": 500, "headers": {"X-Version": "1"}, "body": {"name": "widget"}},
    )

    assert [m.location for m in mismatches] == ["status", "headers.X-Version", "$.name"]


def test_mismatch_str():
    mismatch = Mismatch("$.name", "value differs", "gizmo", "widget")

    assert str(mismatch) == "$.name: value differs (expected 'gizmo', got 'widget')"
