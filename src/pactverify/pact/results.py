"""
Results of a verification run.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pactverify.pact.models import ProviderResponse


@dataclass
class InteractionResult:
    """Outcome of replaying a single interaction."""

    number: int  # 1-based position in the pact
    description: str
    actual: ProviderResponse | None = None  # None if the exchange never completed
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.error is None


@dataclass
class PactVerificationResult:
    """Outcome of verifying a whole pact against a provider."""

    consumer: str
    provider: str
    results: list[InteractionResult] = field(default_factory=list)

    @property
    def all_verified(self) -> bool:
        """True if every interaction passed (trivially so for an empty pact)."""
        return all(r.passed for r in self.results)

    @property
    def failed(self) -> list[InteractionResult]:
        return [r for r in self.results if not r.passed]

    @property
    def verified_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def exit_code(self) -> int:
        """
        Exit code for CI/CD pipelines.

        0 = All interactions verified
        1 = At least one interaction failed
        """
        return 0 if self.all_verified else 1
