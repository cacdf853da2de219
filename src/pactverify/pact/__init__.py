"""
Provider verification for consumer-driven contracts.

Replays the interactions recorded in a pact against a running provider and
checks each actual response against the one the consumer expects.
"""

from .loader import load_pact, load_pact_file
from .models import (
    HttpVerb,
    PactInteraction,
    PactMetadata,
    Party,
    ProviderResponse,
    RequestTemplate,
)
from .pact_file import PactFile
from .request_builder import build_request
from .response_capture import capture_response
from .results import InteractionResult, PactVerificationResult
from .validator import Mismatch, ProviderResponseValidator, ResponseValidator

__all__ = [
    "HttpVerb",
    "InteractionResult",
    "Mismatch",
    "PactFile",
    "PactInteraction",
    "PactMetadata",
    "PactVerificationResult",
    "Party",
    "ProviderResponse",
    "ProviderResponseValidator",
    "RequestTemplate",
    "ResponseValidator",
    "build_request",
    "capture_response",
    "load_pact",
    "load_pact_file",
]
