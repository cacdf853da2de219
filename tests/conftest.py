"""Root test configuration."""

import logging

import pytest
import structlog
from pactverify.config import get_settings
from pactverify.pact import PactFile, PactInteraction, Party


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Keep PACTVERIFY_* from the developer's shell out of tests."""
    for name in ("PROVIDER_BASE_URL", "HTTP_TIMEOUT", "FAIL_FAST", "LOG_LEVEL"):
        monkeypatch.delenv(f"PACTVERIFY_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _interaction(
    description: str,
    path: str,
    *,
    method: str = "GET",
    status: int = 200,
    body=None,
    request_headers=None,
    request_body=None,
) -> PactInteraction:
    return PactInteraction.model_validate(
        {
            "description": description,
            "request": {
                "method": method,
                "path": path,
                "headers": request_headers,
                "body": request_body,
            },
            "response": {"status": status, "body": body},
        }
    )


@pytest.fixture
def make_interaction():
    """Factory for interactions built from plain pact JSON fields."""
    return _interaction


@pytest.fixture
def widget_interaction():
    return _interaction("gets a widget", "/widgets/1", body={"name": "gizmo"})


@pytest.fixture
def widget_pact(widget_interaction):
    pact = PactFile(consumer=Party(name="Web"), provider=Party(name="API"))
    pact.add_interaction(widget_interaction)
    return pact
