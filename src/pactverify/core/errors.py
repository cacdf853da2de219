"""
Unified error handling for pactverify.

This module provides the exception hierarchy raised while loading and
verifying pacts, plus the exit codes the CLI maps them to.

Exit Codes:
- 0: Success
- 1: Verification failed (provider response did not satisfy the pact)
- 10: Configuration error
- 11: Provider error (transport failure talking to the provider)
- 12: Contract error (pact file unreadable or not sendable)
- 127: Unknown/internal error
"""

from __future__ import annotations

import functools
import sys
import traceback
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable, Sequence, TypeVar

import structlog

if TYPE_CHECKING:
    from pactverify.pact.results import PactVerificationResult
    from pactverify.pact.validator import Mismatch

logger = structlog.get_logger()


class ExitCode(IntEnum):
    """Standardized exit codes for CLI commands."""

    SUCCESS = 0
    VERIFICATION_FAILED = 1
    CONFIG_ERROR = 10
    PROVIDER_ERROR = 11
    CONTRACT_ERROR = 12
    UNKNOWN_ERROR = 127


class PactVerifyError(Exception):
    """Base exception for pactverify errors with exit code support."""

    exit_code: ExitCode = ExitCode.UNKNOWN_ERROR
    show_traceback: bool = False

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(PactVerifyError):
    """Raised for configuration-related errors."""

    exit_code = ExitCode.CONFIG_ERROR


class ContractError(PactVerifyError):
    """Raised when a pact cannot be loaded or replayed as written."""

    exit_code = ExitCode.CONTRACT_ERROR


class InvalidHeaderError(ContractError):
    """Raised when a recorded header cannot be put on the wire."""


class UnknownVerbError(PactVerifyError):
    """Raised when an interaction carries a method outside the verb mapping.

    This means a corrupt contract slipped past model validation, so it is
    treated as an internal error and never collected or wrapped.
    """

    show_traceback = True


class ProviderError(PactVerifyError):
    """Raised when the provider cannot be reached or the exchange breaks."""

    exit_code = ExitCode.PROVIDER_ERROR


class VerificationError(PactVerifyError):
    """Base class for provider responses that fail verification."""

    exit_code = ExitCode.VERIFICATION_FAILED


class MalformedResponseBodyError(VerificationError):
    """Raised when a non-empty provider body is not valid JSON."""


class ResponseMismatchError(VerificationError):
    """Raised by a response validator when expected and actual differ."""

    def __init__(
        self,
        message: str,
        mismatches: Sequence[Mismatch] = (),
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.mismatches = list(mismatches)


class InteractionVerificationError(VerificationError):
    """A failure pinned to the interaction that produced it.

    The original error is available as ``__cause__``.
    """

    def __init__(self, number: int, description: str, cause: BaseException):
        message = f"Interaction {number} ({description}) failed: {cause}"
        super().__init__(message, {"interaction": number, "description": description})
        self.number = number
        self.description = description
        self.cause = cause
        if isinstance(cause, PactVerifyError):
            self.exit_code = cause.exit_code
        else:
            self.exit_code = ExitCode.PROVIDER_ERROR


class PactVerificationFailed(VerificationError):
    """Raised at the end of a collect-all run when any interaction failed."""

    def __init__(
        self,
        failures: Sequence[InteractionVerificationError],
        result: PactVerificationResult | None = None,
    ):
        numbers = ", ".join(str(f.number) for f in failures)
        super().__init__(
            f"{len(failures)} interaction(s) failed verification: {numbers}",
            {"failed": [f.number for f in failures]},
        )
        self.failures = list(failures)
        self.result = result


# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., int])


def main_with_error_handling(
    *,
    show_traceback: bool = False,
    log_errors: bool = True,
) -> Callable[[F], F]:
    """
    Decorator for CLI main functions that provides unified error handling.

    Catches exceptions and converts them to appropriate exit codes with
    consistent error reporting.

    Args:
        show_traceback: If True, show full traceback for unexpected errors
        log_errors: If True, log errors to structlog

    Exit codes:
        - PactVerifyError subclasses: Uses the error's exit_code
        - KeyboardInterrupt: Returns 130 (standard for SIGINT)
        - Other exceptions: Returns 127 (unknown error)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> int:
            try:
                return func(*args, **kwargs)
            except PactVerifyError as e:
                if log_errors:
                    logger.error(
                        "command_error",
                        error_type=type(e).__name__,
                        message=e.message,
                        exit_code=e.exit_code,
                        **e.details,
                    )
                if e.show_traceback or show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return e.exit_code
            except KeyboardInterrupt:
                if log_errors:
                    logger.info("command_interrupted")
                return 130  # Standard exit code for SIGINT
            except Exception as e:
                if log_errors:
                    logger.error(
                        "unexpected_error",
                        error_type=type(e).__name__,
                        message=str(e),
                        exit_code=ExitCode.UNKNOWN_ERROR,
                    )
                if show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return ExitCode.UNKNOWN_ERROR

        return wrapper  # type: ignore[return-value]

    return decorator


def format_error_message(error: PactVerifyError) -> str:
    """Format an error message for display to users."""
    msg = error.message
    if error.details:
        detail_str = ", ".join(f"{k}={v}" for k, v in error.details.items())
        msg = f"{msg} ({detail_str})"
    return msg
