"""
CLI commands for pactverify.
"""

from pactverify.cli.verify import verify_command

__all__ = ["verify_command"]
