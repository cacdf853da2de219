"""
Models for a pact: the parties, the recorded interactions and the
request/response shapes they carry.

Field names are snake_case in Python and camelCase on the wire; both
spellings are accepted when validating.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator
from pydantic.alias_generators import to_camel

PACT_SPECIFICATION_VERSION = "1.0.0"

_RECORD_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    populate_by_name=True,
    alias_generator=to_camel,
)


class HttpVerb(StrEnum):
    """HTTP methods an interaction may record."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    PATCH = "PATCH"


class Party(BaseModel):
    """A named consumer or provider."""

    model_config = _RECORD_CONFIG

    name: str


class RequestTemplate(BaseModel):
    """The request a consumer recorded, replayed against the provider."""

    model_config = _RECORD_CONFIG

    method: HttpVerb
    path: str
    query: str | None = None
    headers: dict[str, str] | None = None
    body: JsonValue = None

    @field_validator("method", mode="before")
    @classmethod
    def _normalize_method(cls, value: Any) -> Any:
        # Pact v1 files record methods in lower case
        if isinstance(value, str):
            return value.upper()
        return value


class ProviderResponse(BaseModel):
    """
    A provider response, either expected (recorded) or actual (captured).

    ``headers`` is None when no headers were recorded or received at all,
    which is not the same thing as an empty mapping.
    """

    model_config = _RECORD_CONFIG

    status: int
    headers: dict[str, str] | None = None
    body: JsonValue = None


class PactInteraction(BaseModel):
    """One recorded request and the response the consumer expects for it."""

    model_config = _RECORD_CONFIG

    description: str
    provider_state: str | None = None
    request: RequestTemplate
    response: ProviderResponse


class PactMetadata(BaseModel):
    """Metadata written alongside every pact."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    spec_version: str = Field(
        default=PACT_SPECIFICATION_VERSION,
        alias="pactSpecificationVersion",
    )
