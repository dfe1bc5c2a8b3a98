"""Exception hierarchy for schedule parsing and rendering."""

from __future__ import annotations


class CronFieldError(Exception):
    """Base class for every error raised by cronfield."""


class ParseError(CronFieldError, ValueError):
    """A schedule expression or one of its tokens could not be parsed.

    Attributes:
        token: The offending text, when known.
        field: Name of the schedule slot ("minute", "hour", ...) the token
            belonged to. Only set when raised through ``Job.parse``.
    """

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.token = token
        self.field = field


class MalformedFieldError(CronFieldError, AssertionError):
    """A Field was constructed with a value count its kind does not allow.

    Only reachable by building a ``Field`` by hand; ``Field.parse`` never
    produces one.
    """
