"""Tests for pact record models."""

import pytest
from pactverify.pact import HttpVerb, PactInteraction, PactMetadata, Party, ProviderResponse
from pydantic import ValidationError


class TestRequestTemplate:
    def test_lowercase_method_is_accepted(self, make_interaction):
        interaction = make_interaction("lists widgets", "/widgets", method="get")
        assert interaction.request.method is HttpVerb.GET

    def test_unknown_method_rejected(self, make_interaction):
        with pytest.raises(ValidationError):
            make_interaction("traces", "/widgets", method="TRACE")

    def test_camel_case_fields_accepted(self):
        interaction = PactInteraction.model_validate(
            {
                "description": "creates a widget",
                "providerState": "no widgets exist",
                "request": {"method": "post", "path": "/widgets", "query": "dry_run=1"},
                "response": {"status": 201},
            }
        )

        assert interaction.provider_state == "no widgets exist"
        assert interaction.request.query == "dry_run=1"
        assert interaction.request.body is None


class TestProviderResponse:
    def test_absent_headers_differ_from_empty(self):
        assert ProviderResponse(status=200).headers is None
        assert ProviderResponse(status=200, headers={}).headers == {}

    def test_records_are_frozen(self):
        response = ProviderResponse(status=200)
        with pytest.raises(ValidationError):
            response.status = 500

    def test_body_must_be_json_data(self):
        with pytest.raises(ValidationError):
            ProviderResponse(status=200, body={"when": object()})


class TestPactMetadata:
    def test_default_version(self):
        assert PactMetadata().spec_version == "1.0.0"

    def test_serializes_with_pact_key(self):
        assert PactMetadata().model_dump(by_alias=True) == {"pactSpecificationVersion": "1.0.0"}


def test_party_is_immutable():
    party = Party(name="Web")
    with pytest.raises(ValidationError):
        party.name = "Mobile"
