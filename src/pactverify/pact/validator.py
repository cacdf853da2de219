"""
Response validation.

The driver only depends on the ResponseValidator protocol. The default
ProviderResponseValidator compares literally, following Pact specification
v1: status must match, expected headers must be present, and the expected
body must be contained in the actual body. Matching rules (type, regex and
so on) are not supported.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Protocol

import structlog

from pactverify.core.errors import ResponseMismatchError
from pactverify.pact.models import ProviderResponse

logger = structlog.get_logger()


@dataclass(frozen=True)
class Mismatch:
    """A single difference between an expected and an actual response."""

    location: str  # e.g. "status", "headers.Content-Type", "$.items[0].name"
    reason: str
    expected: Any = None
    actual: Any = None

    def __str__(self) -> str:
        return f"{self.location}: {self.reason} (expected {self.expected!r}, got {self.actual!r})"


class ResponseValidator(Protocol):
    """Decides whether an actual response satisfies an expected one."""

    def validate(self, expected: ProviderResponse, actual: ProviderResponse) -> None:
        """Return normally on a match, raise ResponseMismatchError otherwise."""
        ...


class ProviderResponseValidator:
    """Literal Pact v1 response comparison."""

    def validate(self, expected: ProviderResponse, actual: ProviderResponse) -> None:
        mismatches = [
            *self._compare_status(expected, actual),
            *self._compare_headers(expected, actual),
            *self._compare_body(expected, actual),
        ]

        if mismatches:
            logger.debug("response_mismatch", count=len(mismatches))
            summary = "; ".join(str(m) for m in mismatches)
            raise ResponseMismatchError(
                f"Response did not match the pact: {summary}",
                mismatches,
                {"mismatches": len(mismatches)},
            )

    def _compare_status(
        self, expected: ProviderResponse, actual: ProviderResponse
    ) -> Iterator[Mismatch]:
        if expected.status != actual.status:
            yield Mismatch("status", "status code differs", expected.status, actual.status)

    def _compare_headers(
        self, expected: ProviderResponse, actual: ProviderResponse
    ) -> Iterator[Mismatch]:
        if not expected.headers:
            return

        received: dict[str, str] = {}
        for name, value in (actual.headers or {}).items():
            received.setdefault(name.lower(), value)

        for name, value in expected.headers.items():
            location = f"headers.{name}"
            actual_value = received.get(name.lower())
            if actual_value is None:
                yield Mismatch(location, "header missing", value, None)
            elif _normalize_header_value(value) != _normalize_header_value(actual_value):
                yield Mismatch(location, "header value differs", value, actual_value)

    def _compare_body(
        self, expected: ProviderResponse, actual: ProviderResponse
    ) -> Iterator[Mismatch]:
        # No recorded body means the consumer does not care
        if expected.body is None:
            return
        yield from _diff(expected.body, actual.body, "$")


def _normalize_header_value(value: str) -> str:
    return ",".join(part.strip() for part in value.split(","))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _diff(expected: Any, actual: Any, path: str) -> Iterator[Mismatch]:
    if isinstance(expected, dict):
        if not isinstance(actual, dict):
            yield Mismatch(path, "expected an object", expected, actual)
            return
        for key, value in expected.items():
            child = f"{path}.{key}"
            if key not in actual:
                yield Mismatch(child, "key missing", value, None)
            else:
                yield from _diff(value, actual[key], child)
        return

    if isinstance(expected, list):
        if not isinstance(actual, list):
            yield Mismatch(path, "expected an array", expected, actual)
            return
        if len(expected) != len(actual):
            yield Mismatch(path, "array length differs", len(expected), len(actual))
            return
        for index, (item, actual_item) in enumerate(zip(expected, actual)):
            yield from _diff(item, actual_item, f"{path}[{index}]")
        return

    if _is_number(expected) and _is_number(actual):
        if expected != actual:
            yield Mismatch(path, "value differs", expected, actual)
        return

    if type(expected) is not type(actual) or expected != actual:
        yield Mismatch(path, "value differs", expected, actual)
