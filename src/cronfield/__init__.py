"""cronfield: cron schedule lines as immutable, matchable values."""

from cronfield.config import Settings, configure_logging, get_settings
from cronfield.schedule import (
    CronFieldError,
    Field,
    FieldKind,
    Job,
    MalformedFieldError,
    ParseError,
    parse,
)

__all__ = [
    "CronFieldError",
    "Field",
    "FieldKind",
    "Job",
    "MalformedFieldError",
    "ParseError",
    "Settings",
    "configure_logging",
    "get_settings",
    "parse",
]

__version__ = "0.1.0"
