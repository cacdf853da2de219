"""
Configuration for pactverify.

Settings are read from PACTVERIFY_* environment variables or a .env file.
"""

from pactverify.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
