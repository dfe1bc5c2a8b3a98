"""Configuration package — settings and logging bootstrap."""

from cronfield.config.log_setup import configure_logging
from cronfield.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
