"""
JSON serialization of recorded request bodies.

Bodies are written the way pact files are: mapping keys in camelCase and
entries whose value is null left out, so a body captured from a provider
and written back serializes to the same text.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

DEFAULT_CONTENT_TYPE = "application/json"


def camel_case(name: str) -> str:
    """Lower the leading run of capitals in a name.

    "Name" -> "name", "URLValue" -> "urlValue", "ID" -> "id". Names that do
    not start with a capital (including snake_case) are returned unchanged.
    """
    if not name or not name[0].isupper():
        return name

    chars = list(name)
    for i, char in enumerate(chars):
        if i == 1 and not char.isupper():
            break
        has_next = i + 1 < len(chars)
        if i > 0 and has_next and not chars[i + 1].isupper():
            if chars[i + 1].isspace():
                chars[i] = char.lower()
            break
        chars[i] = char.lower()

    return "".join(chars)


def normalize_body(value: Any) -> Any:
    """Convert a body into plain JSON data with pact key conventions."""
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")

    if isinstance(value, Mapping):
        return {
            camel_case(str(key)): normalize_body(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, (list, tuple)):
        return [normalize_body(item) for item in value]
    return value


def serialize_body(value: Any) -> str:
    """Serialize a request body to compact JSON text."""
    return json.dumps(normalize_body(value), separators=(",", ":"), ensure_ascii=False)
