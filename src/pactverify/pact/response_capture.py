"""
Normalizes a provider's HTTP reply into a ProviderResponse.
"""

from __future__ import annotations

import json

import httpx
import structlog
from pydantic import JsonValue

from pactverify.core.errors import MalformedResponseBodyError
from pactverify.pact.models import ProviderResponse

logger = structlog.get_logger()


def convert_headers(headers: httpx.Headers) -> dict[str, str] | None:
    """
    Flatten response headers into a case-sensitive mapping.

    httpx keeps status-line and entity headers in one collection, so every
    raw header is considered. The first value wins for repeated names.

    Returns:
        The mapping, or None when the response carried no headers at all
    """
    if not headers.raw:
        return None

    converted: dict[str, str] = {}
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode(headers.encoding)
        converted.setdefault(name, raw_value.decode(headers.encoding))
    return converted


def parse_body(text: str, status: int) -> JsonValue:
    """Parse a response payload, treating an empty or blank payload as no body."""
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("response_body_not_json", status=status, error=str(exc))
        raise MalformedResponseBodyError(
            f"Provider returned a body that is not valid JSON: {exc}",
            {"status": status},
        ) from exc


def _normalize(response: httpx.Response) -> ProviderResponse:
    return ProviderResponse(
        status=response.status_code,
        headers=convert_headers(response.headers),
        body=parse_body(response.text, response.status_code),
    )


def capture_response(response: httpx.Response) -> ProviderResponse:
    """Read a response fully and normalize it."""
    response.read()
    return _normalize(response)


async def acapture_response(response: httpx.Response) -> ProviderResponse:
    """Async counterpart of capture_response."""
    await response.aread()
    return _normalize(response)
