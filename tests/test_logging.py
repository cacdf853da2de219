"""Tests for logging configuration."""

import logging

import structlog
from pactverify.logging import configure_logging


def test_configure_logging_accepts_level_names():
    root = logging.getLogger()
    original_level = root.level
    original_config = structlog.get_config()
    try:
        configure_logging("info")
        assert root.level == logging.INFO
        assert structlog.is_configured()
    finally:
        structlog.configure(**original_config)
        root.setLevel(original_level)
