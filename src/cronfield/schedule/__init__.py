"""Schedule package — cron Field and Job value types."""

from cronfield.schedule.errors import CronFieldError, MalformedFieldError, ParseError
from cronfield.schedule.field import Field, FieldKind
from cronfield.schedule.job import Job, parse

__all__ = [
    "CronFieldError",
    "Field",
    "FieldKind",
    "Job",
    "MalformedFieldError",
    "ParseError",
    "parse",
]
