"""
The pact and its verification driver.

A PactFile holds the consumer, the provider and the recorded interactions,
and replays those interactions one at a time against a live provider.
"""

from __future__ import annotations

from typing import Callable, Iterable, Protocol

import httpx
import structlog

from pactverify.core.errors import (
    InteractionVerificationError,
    PactVerificationFailed,
    PactVerifyError,
    ProviderError,
    UnknownVerbError,
    VerificationError,
)
from pactverify.pact.models import PactInteraction, PactMetadata, Party, ProviderResponse
from pactverify.pact.request_builder import build_request
from pactverify.pact.response_capture import acapture_response, capture_response
from pactverify.pact.results import InteractionResult, PactVerificationResult
from pactverify.pact.validator import ProviderResponseValidator, ResponseValidator

logger = structlog.get_logger()

ProgressSink = Callable[[str], None]


class Transport(Protocol):
    """Anything that sends a request and blocks for the reply (httpx.Client)."""

    def send(self, request: httpx.Request) -> httpx.Response: ...


class AsyncTransport(Protocol):
    """Async counterpart of Transport (httpx.AsyncClient)."""

    async def send(self, request: httpx.Request) -> httpx.Response: ...


def format_progress(number: int, consumer: str, provider: str, description: str) -> str:
    return f"{number}) Verifying a Pact between {consumer} and {provider} - {description}."


def _emit(sink: ProgressSink, line: str) -> None:
    try:
        sink(line)
    except Exception as exc:
        logger.warning("progress_sink_failed", line=line, error=str(exc))


class PactFile:
    """
    A consumer/provider pact and its verification driver.

    Interactions are kept in the order they were added. Callers must not
    add interactions while a verification run is in progress.
    """

    def __init__(self, consumer: Party | None = None, provider: Party | None = None):
        self.consumer = consumer
        self.provider = provider
        self._interactions: list[PactInteraction] = []
        self._metadata = PactMetadata()

    @property
    def interactions(self) -> tuple[PactInteraction, ...]:
        return tuple(self._interactions)

    @property
    def metadata(self) -> PactMetadata:
        return self._metadata

    @property
    def consumer_name(self) -> str:
        return self.consumer.name if self.consumer else ""

    @property
    def provider_name(self) -> str:
        return self.provider.name if self.provider else ""

    def add_interaction(self, interaction: PactInteraction | None) -> None:
        """Append an interaction. None is ignored."""
        if interaction is None:
            return
        self._interactions.append(interaction)

    def add_interactions(self, interactions: Iterable[PactInteraction | None] | None) -> None:
        """Append interactions in order, skipping None entries."""
        if not interactions:
            return
        for interaction in interactions:
            self.add_interaction(interaction)

    def verify(
        self,
        transport: Transport,
        *,
        validator: ResponseValidator | None = None,
        progress: ProgressSink | None = None,
        fail_fast: bool = True,
    ) -> PactVerificationResult:
        """
        Replay every interaction against the provider behind ``transport``.

        Each interaction is built, sent, captured and validated before the
        next one starts.

        Args:
            transport: Sends requests to the provider, e.g. an httpx.Client
                with base_url pointing at it
            validator: Compares expected and actual responses
                (ProviderResponseValidator by default)
            progress: Receives one line per interaction (print by default)
            fail_fast: Stop at the first failure. When False, response
                mismatches and malformed bodies are collected and raised
                together at the end.

        Returns:
            PactVerificationResult with one entry per interaction

        Raises:
            InteractionVerificationError: An interaction failed (fail_fast),
                the provider could not be reached, or the validator raised
                an error of its own. The original error is the __cause__.
            PactVerificationFailed: One or more interactions failed
                (fail_fast=False)
        """
        interactions = tuple(self._interactions)
        result = PactVerificationResult(consumer=self.consumer_name, provider=self.provider_name)
        if not interactions:
            return result

        validator = validator or ProviderResponseValidator()
        emit = progress or print
        base_url = getattr(transport, "base_url", "")
        failures: list[InteractionVerificationError] = []

        for number, interaction in enumerate(interactions, start=1):
            _emit(emit, self._progress_line(number, interaction))
            actual: ProviderResponse | None = None
            try:
                request = build_request(interaction.request, base_url)
                response = self._send(transport, request)
                actual = capture_response(response)
                validator.validate(interaction.response, actual)
            except UnknownVerbError:
                raise
            except Exception as exc:
                self._fail(result, failures, number, interaction, actual, exc, fail_fast)
            else:
                self._pass(result, number, interaction, actual)

        self._finish(result, failures)
        return result

    async def verify_async(
        self,
        transport: AsyncTransport,
        *,
        validator: ResponseValidator | None = None,
        progress: ProgressSink | None = None,
        fail_fast: bool = True,
    ) -> PactVerificationResult:
        """Same as verify, awaiting each exchange on an async transport."""
        interactions = tuple(self._interactions)
        result = PactVerificationResult(consumer=self.consumer_name, provider=self.provider_name)
        if not interactions:
            return result

        validator = validator or ProviderResponseValidator()
        emit = progress or print
        base_url = getattr(transport, "base_url", "")
        failures: list[InteractionVerificationError] = []

        for number, interaction in enumerate(interactions, start=1):
            _emit(emit, self._progress_line(number, interaction))
            actual: ProviderResponse | None = None
            try:
                request = build_request(interaction.request, base_url)
                response = await self._send_async(transport, request)
                actual = await acapture_response(response)
                validator.validate(interaction.response, actual)
            except UnknownVerbError:
                raise
            except Exception as exc:
                self._fail(result, failures, number, interaction, actual, exc, fail_fast)
            else:
                self._pass(result, number, interaction, actual)

        self._finish(result, failures)
        return result

    def _progress_line(self, number: int, interaction: PactInteraction) -> str:
        logger.info(
            "interaction_verifying",
            interaction=number,
            description=interaction.description,
            provider_state=interaction.provider_state,
        )
        return format_progress(
            number, self.consumer_name, self.provider_name, interaction.description
        )

    @staticmethod
    def _send(transport: Transport, request: httpx.Request) -> httpx.Response:
        try:
            response = transport.send(request)
            response.read()
            return response
        except httpx.HTTPError as exc:
            raise _provider_error(request, exc) from exc

    @staticmethod
    async def _send_async(transport: AsyncTransport, request: httpx.Request) -> httpx.Response:
        try:
            response = await transport.send(request)
            await response.aread()
            return response
        except httpx.HTTPError as exc:
            raise _provider_error(request, exc) from exc

    @staticmethod
    def _pass(
        result: PactVerificationResult,
        number: int,
        interaction: PactInteraction,
        actual: ProviderResponse | None,
    ) -> None:
        logger.info("interaction_verified", interaction=number, description=interaction.description)
        result.results.append(
            InteractionResult(number=number, description=interaction.description, actual=actual)
        )

    @staticmethod
    def _fail(
        result: PactVerificationResult,
        failures: list[InteractionVerificationError],
        number: int,
        interaction: PactInteraction,
        actual: ProviderResponse | None,
        exc: Exception,
        fail_fast: bool,
    ) -> None:
        reason = exc.message if isinstance(exc, PactVerifyError) else str(exc)
        failure = InteractionVerificationError(number, interaction.description, exc)
        logger.warning(
            "interaction_failed",
            interaction=number,
            description=interaction.description,
            error_type=type(exc).__name__,
            error=reason,
        )
        result.results.append(
            InteractionResult(
                number=number,
                description=interaction.description,
                actual=actual,
                error=reason,
            )
        )

        # Only response-level failures are collected; anything else aborts
        if fail_fast or not isinstance(exc, VerificationError):
            raise failure from exc
        failures.append(failure)

    @staticmethod
    def _finish(
        result: PactVerificationResult, failures: list[InteractionVerificationError]
    ) -> None:
        if failures:
            raise PactVerificationFailed(failures, result)


def _provider_error(request: httpx.Request, exc: httpx.HTTPError) -> ProviderError:
    logger.warning(
        "provider_request_failed",
        method=request.method,
        url=str(request.url),
        error=str(exc),
    )
    return ProviderError(
        f"{request.method} {request.url} failed: {exc}",
        {"method": request.method, "url": str(request.url)},
    )
