"""Tests for the verb to method mapping."""

import pytest
from pactverify.core.errors import UnknownVerbError
from pactverify.pact.models import HttpVerb
from pactverify.pact.verbs import HTTP_VERB_MAP, lookup_method


def test_mapping_is_total():
    assert set(HTTP_VERB_MAP) == set(HttpVerb)


@pytest.mark.parametrize(
    "verb,token",
    [
        (HttpVerb.GET, "GET"),
        (HttpVerb.POST, "POST"),
        (HttpVerb.PUT, "PUT"),
        (HttpVerb.DELETE, "DELETE"),
        (HttpVerb.HEAD, "HEAD"),
        (HttpVerb.PATCH, "PATCH"),
    ],
)
def test_lookup_method(verb, token):
    assert lookup_method(verb) == token


@pytest.mark.parametrize("verb", ["TRACE", "get", None, 3])
def test_lookup_rejects_non_members(verb):
    with pytest.raises(UnknownVerbError):
        lookup_method(verb)
