"""Logging bootstrap for applications embedding cronfield."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cronfield.config.settings import Settings


def configure_logging(settings: Settings, *, force: bool = False) -> None:
    """Configure the root logger from settings.

    The library itself never installs handlers; call this once from the
    application entry point.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format,
        datefmt=settings.log_datefmt,
        force=force,
    )
    logging.getLogger(__name__).debug("Logging configured at %s", settings.log_level)
