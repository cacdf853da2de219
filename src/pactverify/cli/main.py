"""
Command line entry point for pactverify.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from pactverify import __version__
from pactverify.cli.verify import handle_verify_command, register_verify_parser
from pactverify.config import get_settings
from pactverify.core.errors import main_with_error_handling
from pactverify.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pactverify",
        description="Verify a provider against consumer-driven contracts",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        help="Log level for structured logs on stderr (default from PACTVERIFY_LOG_LEVEL)",
    )

    subparsers = parser.add_subparsers(dest="command")
    register_verify_parser(subparsers)
    return parser


@main_with_error_handling()
def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level or get_settings().log_level)

    if args.command == "verify":
        return handle_verify_command(args)

    parser.print_help()
    return 1
