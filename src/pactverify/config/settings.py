"""
Application settings using Pydantic.

Provides environment-based configuration loading with PACTVERIFY_ prefix.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Provider under verification
    provider_base_url: str | None = None

    # HTTP client settings (applied to the transport, never to the driver)
    http_timeout: float = 30.0

    # Stop at the first failing interaction
    fail_fast: bool = True

    # Logging
    log_level: str = "WARNING"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "PACTVERIFY_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
