"""A full cron line: five time fields plus an opaque task string.

Format: "minute hour day month day_of_week [task...]"
Example: '* */5 5 * * echo "Hello, world"' -> every minute of every fifth
hour on the 5th of each month, running ``echo "Hello, world"``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from cronfield.schedule.errors import ParseError
from cronfield.schedule.field import Field

logger = logging.getLogger(__name__)

# (attribute name, human-readable name used by describe())
_TIME_FIELDS: tuple[tuple[str, str], ...] = (
    ("minute", "minute"),
    ("hour", "hour"),
    ("day", "day of month"),
    ("month", "month"),
    ("day_of_week", "day of the week"),
)


@dataclass(frozen=True)
class Job:
    """Immutable parsed cron line."""

    minute: Field
    hour: Field
    day: Field
    month: Field
    day_of_week: Field
    task: str = ""

    @classmethod
    def parse(cls, expression: str) -> Job:
        """Parse a cron line into a Job.

        Tokens after the fifth are re-joined with single spaces to form the
        task, so runs of whitespace inside the task collapse.

        Raises:
            ParseError: If there are fewer than 5 tokens or a time field is
                malformed. ``exc.field`` names the failing field.
        """
        parts = expression.split()
        if len(parts) < 5:
            msg = f"expected at least 5 fields, got {len(parts)}: {expression!r}"
            logger.debug("Rejected cron expression: %s", msg)
            raise ParseError(msg, token=expression)

        fields: dict[str, Field] = {}
        for (attr, _), token in zip(_TIME_FIELDS, parts[:5]):
            try:
                fields[attr] = Field.parse(token)
            except ParseError as exc:
                logger.debug("Failed to parse %s field %r: %s", attr, token, exc)
                raise ParseError(f"{attr} field: {exc}", token=token, field=attr) from exc

        job = cls(task=" ".join(parts[5:]), **fields)
        logger.debug("Parsed cron expression %r -> %s", expression, job)
        return job

    def render(self) -> str:
        """Render back to a single-spaced cron line."""
        tokens = [getattr(self, attr).render() for attr, _ in _TIME_FIELDS]
        tokens.append(self.task)
        return " ".join(tokens).rstrip()

    def __str__(self) -> str:
        return self.render()

    def matches(self, minute: int, hour: int, day: int, month: int, day_of_week: int) -> bool:
        """Return True if every field matches its component.

        The numbering convention (e.g. 0=Sunday, 1-based months) is the
        caller's; values are compared as raw integers.
        """
        return (
            self.minute.matches(minute)
            and self.hour.matches(hour)
            and self.day.matches(day)
            and self.month.matches(month)
            and self.day_of_week.matches(day_of_week)
        )

    def check(self, moment: datetime) -> bool:
        """Check a datetime against the schedule.

        Uses the datetime's own wall-clock fields with months 1-12 and
        weekdays 0=Sunday through 6=Saturday. No timezone conversion.
        """
        return self.matches(
            moment.minute,
            moment.hour,
            moment.day,
            moment.month,
            moment.isoweekday() % 7,  # 0=Sun, 6=Sat
        )

    def is_now(self) -> bool:
        """Shortcut for ``check(datetime.now())``."""
        return self.check(datetime.now())

    def describe(self) -> str:
        """Human-readable English description of the schedule."""
        clauses = ", ".join(getattr(self, attr).describe(name) for attr, name in _TIME_FIELDS)
        if self.task.strip():
            return f'"{self.task}" scheduled to run {clauses}'
        return clauses


def parse(expression: str) -> Job:
    """Module-level alias for :meth:`Job.parse`."""
    return Job.parse(expression)
