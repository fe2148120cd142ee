"""
Topcoder Challenges Client Configuration

Settings are read from environment variables (or a local .env file).
"""

import logging
import sys
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # === Topcoder API Configuration ===
    api_v2_base_url: str = Field(
        default="https://api.topcoder.com/v2",
        description="Topcoder API v2 base URL (challenge types)"
    )
    api_v3_base_url: str = Field(
        default="https://api.topcoder.com/v3",
        description="Topcoder API v3 base URL (challenges, members, tags)"
    )

    # === HTTP Configuration ===
    http_timeout: float = Field(default=10.0, description="Request timeout in seconds")
    http_retry_attempts: int = Field(
        default=1,
        ge=1,
        description="Attempts per request on connection errors (1 disables retry)"
    )

    # === Logging ===
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Send package logs to stdout in the usual format.

    Only the ``tcchallenges`` logger is touched, so host applications keep
    their own root configuration. Calling it again just updates the level.

    Args:
        level: Log level name; defaults to the ``log_level`` setting.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("tcchallenges")
    logger.setLevel((level or get_settings().log_level).upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
