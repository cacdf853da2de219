from pactverify.core.errors import (
    ConfigurationError,
    ContractError,
    ExitCode,
    InteractionVerificationError,
    InvalidHeaderError,
    MalformedResponseBodyError,
    PactVerificationFailed,
    PactVerifyError,
    ProviderError,
    ResponseMismatchError,
    UnknownVerbError,
    VerificationError,
)

__all__ = [
    "ConfigurationError",
    "ContractError",
    "ExitCode",
    "InteractionVerificationError",
    "InvalidHeaderError",
    "MalformedResponseBodyError",
    "PactVerificationFailed",
    "PactVerifyError",
    "ProviderError",
    "ResponseMismatchError",
    "UnknownVerbError",
    "VerificationError",
]
