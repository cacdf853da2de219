"""
CLI command for provider verification.

Replays the interactions of a pact file against a running provider.
"""

from __future__ import annotations

import argparse
from typing import Iterable, Optional

import httpx
from rich.markup import escape

from pactverify.cli.ux import console, error, header, info, progress_line, success
from pactverify.config import get_settings
from pactverify.core.errors import (
    ContractError,
    ExitCode,
    InteractionVerificationError,
    PactVerificationFailed,
    ResponseMismatchError,
    format_error_message,
)
from pactverify.pact import PactVerificationResult, load_pact_file


def verify_command(
    pact_file: str,
    provider_base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    fail_fast: Optional[bool] = None,
) -> int:
    """
    Verify a provider against a pact file.

    Exit codes:
        0 = All interactions verified
        1 = At least one interaction failed verification
        10 = No provider URL configured
        11 = Provider unreachable
        12 = Pact file unreadable or invalid

    Args:
        pact_file: Path to the pact JSON file
        provider_base_url: Provider base URL (or PACTVERIFY_PROVIDER_BASE_URL)
        timeout: HTTP timeout in seconds (or PACTVERIFY_HTTP_TIMEOUT)
        fail_fast: Stop at the first failure (or PACTVERIFY_FAIL_FAST)

    Returns:
        Exit code
    """
    settings = get_settings()
    base_url = provider_base_url or settings.provider_base_url
    if timeout is None:
        timeout = settings.http_timeout
    if fail_fast is None:
        fail_fast = settings.fail_fast

    if not base_url:
        error("No provider base URL provided")
        console.print()
        console.print(
            "[muted]Provide via --provider-base-url or PACTVERIFY_PROVIDER_BASE_URL env var[/muted]"
        )
        return ExitCode.CONFIG_ERROR

    try:
        pact = load_pact_file(pact_file)
    except ContractError as e:
        error(format_error_message(e))
        return e.exit_code

    header(f"Pact Verification: {pact.consumer_name} → {pact.provider_name}")
    console.print()
    console.print(f"[cyan]Provider:[/cyan] {escape(base_url)}")
    console.print(f"[cyan]Pact:[/cyan] {escape(pact_file)}")
    console.print()

    if not pact.interactions:
        info("No interactions recorded in pact")
        return ExitCode.SUCCESS

    with httpx.Client(base_url=base_url, timeout=timeout) as client:
        try:
            result = pact.verify(client, progress=progress_line, fail_fast=fail_fast)
        except PactVerificationFailed as e:
            console.print()
            _print_failures(e.failures)
            if e.result is not None:
                _print_summary(e.result)
            return e.exit_code
        except InteractionVerificationError as e:
            console.print()
            _print_failures([e])
            return e.exit_code

    console.print()
    _print_summary(result)
    return result.exit_code


def _print_failures(failures: Iterable[InteractionVerificationError]) -> None:
    """Print each failed interaction with the reason it failed."""
    console.print("[bold]Failures:[/bold]")
    for failure in failures:
        error(f"{failure.number}) {failure.description}")
        cause = failure.cause
        if isinstance(cause, ResponseMismatchError) and cause.mismatches:
            for mismatch in cause.mismatches:
                console.print(f"    [muted]•[/muted] {escape(str(mismatch))}")
        else:
            console.print(f"    [muted]•[/muted] {escape(str(cause))}")
    console.print()


def _print_summary(result: PactVerificationResult) -> None:
    """Print verification totals and the final verdict."""
    console.print("[bold]Summary:[/bold]")
    console.print(f"  [muted]Total:[/muted] {len(result.results)} interactions")
    console.print(f"  [success]✓[/success] Verified: {result.verified_count}")
    if result.failed:
        console.print(f"  [error]✗[/error] Failed: {len(result.failed)}")
    console.print()

    if result.all_verified:
        success(f"{result.provider} honours its pact with {result.consumer}")
    else:
        error(f"{result.provider} does not honour its pact with {result.consumer}")


def register_verify_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register verify subcommand parser."""
    parser = subparsers.add_parser(
        "verify",
        help="Verify a provider against a pact file",
    )

    parser.add_argument(
        "pact_file",
        help="Path to pact JSON file",
    )

    parser.add_argument(
        "--provider-base-url",
        "-u",
        help="Provider base URL (or set PACTVERIFY_PROVIDER_BASE_URL env var)",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="HTTP timeout in seconds (default from PACTVERIFY_HTTP_TIMEOUT, 30)",
    )

    parser.add_argument(
        "--collect-all",
        action="store_true",
        help="Keep verifying after a mismatch and report every failure at the end",
    )


def handle_verify_command(args: argparse.Namespace) -> int:
    """Handle verify subcommand."""
    return verify_command(
        pact_file=args.pact_file,
        provider_base_url=getattr(args, "provider_base_url", None),
        timeout=getattr(args, "timeout", None),
        fail_fast=False if getattr(args, "collect_all", False) else None,
    )
