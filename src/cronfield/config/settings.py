"""Pydantic-based settings loaded from environment variables.

Every field maps to a ``CRONFIELD_``-prefixed env var (or ``.env`` entry).
The parsing core never reads settings; they only drive application-side
concerns such as logging.

Usage::

    from cronfield.config import get_settings
    settings = get_settings()
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseSettings):
    """Central configuration — every field maps to a CRONFIELD_* env var."""

    model_config = SettingsConfigDict(
        env_prefix="CRONFIELD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    # -- Logging ------------------------------------------------------------
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    log_datefmt: str = DEFAULT_LOG_DATEFMT

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> str:
        """Upper-case the level name and reject names logging doesn't know."""
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {value!r}"
            raise ValueError(msg)
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return Settings()
