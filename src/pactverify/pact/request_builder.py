"""
Builds the live HTTP request for a recorded interaction.

Nothing here touches the network: the result is an ``httpx.Request`` that
any httpx transport can send.
"""

from __future__ import annotations

import re
from typing import Mapping

import httpx
import structlog

from pactverify.core.errors import InvalidHeaderError
from pactverify.pact.models import RequestTemplate
from pactverify.pact.serialization import DEFAULT_CONTENT_TYPE, serialize_body
from pactverify.pact.verbs import lookup_method

logger = structlog.get_logger()

CONTENT_TYPE = "Content-Type"

# RFC 7230 token characters
_HEADER_NAME_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
_FORBIDDEN_VALUE_RE = re.compile(r"[\x00\r\n]")


def is_content_type(name: str) -> bool:
    """True if a header name is Content-Type in any casing."""
    return name.lower() == CONTENT_TYPE.lower()


def find_content_type(headers: Mapping[str, str] | None) -> str | None:
    """Return the Content-Type value from recorded headers, if any."""
    if not headers:
        return None
    for name, value in headers.items():
        if is_content_type(name):
            return value
    return None


def media_type_of(content_type: str) -> str:
    """Return the media type part of a Content-Type value.

    Parameters such as charset are dropped.
    """
    media_type = content_type.split(";")[0].strip()
    if not media_type:
        raise InvalidHeaderError(
            f"Content-Type {content_type!r} has no media type",
            {"header": CONTENT_TYPE},
        )
    return media_type


def validate_header(name: str, value: str) -> None:
    """Reject headers that cannot be written to an HTTP/1.1 request."""
    if not isinstance(name, str) or not _HEADER_NAME_RE.match(name):
        raise InvalidHeaderError(f"Invalid header name {name!r}", {"header": repr(name)})
    if not isinstance(value, str) or _FORBIDDEN_VALUE_RE.search(value):
        raise InvalidHeaderError(f"Invalid value for header {name}", {"header": name})
    if not value.isascii():
        raise InvalidHeaderError(
            f"Header {name} contains non-ASCII characters",
            {"header": name},
        )


def resolve_url(base_url: httpx.URL | str, template: RequestTemplate) -> httpx.URL:
    """Join the template path (and query) onto the provider base URL."""
    target = template.path
    if template.query:
        target = f"{target}?{template.query}"

    url = httpx.URL(target)
    if url.is_relative_url and str(base_url):
        base = str(base_url).rstrip("/")
        return httpx.URL(f"{base}/{target.lstrip('/')}")
    return url


def build_request(
    template: RequestTemplate,
    base_url: httpx.URL | str = "",
) -> httpx.Request:
    """
    Build the outbound request for a recorded request template.

    Args:
        template: The recorded request
        base_url: Provider base URL that relative paths are resolved against

    Returns:
        An httpx.Request ready to hand to a transport

    Raises:
        InvalidHeaderError: A recorded header cannot be sent
        UnknownVerbError: The template method has no mapping
    """
    method = lookup_method(template.method)
    url = resolve_url(base_url, template)

    headers: list[tuple[str, str]] = []
    content: bytes | None = None

    if template.body is not None:
        recorded_type = find_content_type(template.headers)
        media_type = media_type_of(recorded_type) if recorded_type else DEFAULT_CONTENT_TYPE
        validate_header(CONTENT_TYPE, media_type)
        content = serialize_body(template.body).encode("utf-8")
        headers.append((CONTENT_TYPE, media_type))

    for name, value in (template.headers or {}).items():
        # Content-Type only travels with the body
        if is_content_type(name):
            continue
        validate_header(name, value)
        headers.append((name, value))

    logger.debug("request_built", method=method, url=str(url), has_body=content is not None)

    return httpx.Request(method, url, headers=headers, content=content)
