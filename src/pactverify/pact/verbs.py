"""
Mapping from recorded verbs to the method tokens sent on the wire.
"""

from __future__ import annotations

from typing import Any

from pactverify.core.errors import UnknownVerbError
from pactverify.pact.models import HttpVerb

HTTP_VERB_MAP: dict[HttpVerb, str] = {
    HttpVerb.GET: "GET",
    HttpVerb.POST: "POST",
    HttpVerb.PUT: "PUT",
    HttpVerb.DELETE: "DELETE",
    HttpVerb.HEAD: "HEAD",
    HttpVerb.PATCH: "PATCH",
}


def lookup_method(verb: Any) -> str:
    """Return the method token for a verb.

    Raises:
        UnknownVerbError: verb is not an HttpVerb member
    """
    if not isinstance(verb, HttpVerb) or verb not in HTTP_VERB_MAP:
        raise UnknownVerbError(
            f"No HTTP method mapped for verb {verb!r}",
            {"verb": repr(verb)},
        )
    return HTTP_VERB_MAP[verb]
