"""A single cron time slot (minute, hour, day, month or day of week).

Supported token syntax, checked in this order (first match wins):

    "*"       -> EVERY
    "*/5"     -> STEP, matches values divisible by 5
    "3,7,8"   -> MULTIPLE, order kept as written
    "1-5"     -> RANGE, inclusive on both ends
    "?"       -> ANY, reserved placeholder, never matches
    "7"       -> EXACT

No bounds are checked: a minute token of "99" parses fine and simply never
matches a real clock.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from cronfield.schedule.errors import MalformedFieldError, ParseError

# ASCII digits only; int() alone would also accept " 5", "1_0" and "٥".
_INT_RE: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")
_STEP_RE: re.Pattern[str] = re.compile(r"\+?[0-9]+")

# Values must fit a signed 64-bit integer.
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class FieldKind(enum.Enum):
    """Syntactic form of a Field."""

    EXACT = "exact"
    EVERY = "every"
    MULTIPLE = "multiple"
    RANGE = "range"
    STEP = "step"
    ANY = "any"


# kind -> (min values, max values); None means unbounded
_VALUE_COUNTS: dict[FieldKind, tuple[int, int | None]] = {
    FieldKind.EXACT: (1, 1),
    FieldKind.EVERY: (0, 0),
    FieldKind.MULTIPLE: (1, None),
    FieldKind.RANGE: (2, 2),
    FieldKind.STEP: (1, 1),
    FieldKind.ANY: (0, 0),
}


def _parse_int(
    text: str,
    token: str,
    *,
    pattern: re.Pattern[str] = _INT_RE,
    what: str = "integer",
) -> int:
    if not pattern.fullmatch(text):
        msg = f"invalid {what} {text!r} in field token {token!r}"
        raise ParseError(msg, token=token)
    try:
        value = int(text)
    except ValueError as exc:
        # int() refuses very long digit strings (sys.get_int_max_str_digits)
        msg = f"{what} out of range in field token {token!r}"
        raise ParseError(msg, token=token) from exc
    if not _INT_MIN <= value <= _INT_MAX:
        raise ParseError(f"{what} out of range in field token {token!r}", token=token)
    return value


@dataclass(frozen=True)
class Field:
    """Immutable cron field: a kind plus its integer operands."""

    kind: FieldKind
    values: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of ints but always store a tuple so Fields hash.
        object.__setattr__(self, "values", tuple(self.values))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def every(cls) -> Field:
        return cls(FieldKind.EVERY)

    @classmethod
    def any(cls) -> Field:
        return cls(FieldKind.ANY)

    @classmethod
    def exact(cls, value: int) -> Field:
        return cls(FieldKind.EXACT, (value,))

    @classmethod
    def step(cls, divisor: int) -> Field:
        return cls(FieldKind.STEP, (divisor,))

    @classmethod
    def range(cls, low: int, high: int) -> Field:
        return cls(FieldKind.RANGE, (low, high))

    @classmethod
    def multiple(cls, *values: int) -> Field:
        return cls(FieldKind.MULTIPLE, values)

    @classmethod
    def parse(cls, token: str) -> Field:
        """Parse one whitespace-free cron token into a Field.

        Raises:
            ParseError: If the token (or any integer inside it) is malformed.
        """
        s = token.strip()

        if s == "*":
            return cls.every()

        if s.startswith("*/"):
            return cls.step(_parse_int(s[2:], s, pattern=_STEP_RE, what="step value"))

        if "," in s:
            return cls(FieldKind.MULTIPLE, tuple(_parse_int(part, s) for part in s.split(",")))

        if "-" in s:
            parts = s.split("-")
            if len(parts) != 2:
                raise ParseError(f"invalid range format: {s!r}", token=s)
            low, high = parts
            return cls.range(_parse_int(low, s), _parse_int(high, s))

        if s == "?":
            return cls.any()

        return cls.exact(_parse_int(s, s))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _check_shape(self) -> None:
        """Raise MalformedFieldError if the value count contradicts the kind."""
        if self.kind not in _VALUE_COUNTS:
            raise MalformedFieldError(f"unknown field kind: {self.kind!r}")
        low, high = _VALUE_COUNTS[self.kind]
        count = len(self.values)
        if count < low or (high is not None and count > high):
            expected = f"at least {low}" if high is None else str(low)
            msg = f"{self.kind.name} field requires {expected} value(s); got {count}"
            raise MalformedFieldError(msg)

    def render(self) -> str:
        """Render back to cron token syntax, e.g. ``"*/5"`` or ``"5,4"``."""
        self._check_shape()
        kind = self.kind
        if kind is FieldKind.EXACT:
            return str(self.values[0])
        if kind is FieldKind.EVERY:
            return "*"
        if kind is FieldKind.MULTIPLE:
            return ",".join(str(v) for v in self.values)
        if kind is FieldKind.RANGE:
            return f"{self.values[0]}-{self.values[1]}"
        if kind is FieldKind.STEP:
            return f"*/{self.values[0]}"
        return "?"

    def __str__(self) -> str:
        return self.render()

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def matches(self, value: int) -> bool:
        """Return True if ``value`` satisfies this field.

        A STEP field tests ``value % n == 0`` with no start offset. ANY is a
        reserved placeholder and never matches.
        """
        kind = self.kind
        values = self.values

        if kind is FieldKind.EXACT:
            return len(values) == 1 and values[0] == value
        if kind is FieldKind.EVERY:
            return True
        if kind is FieldKind.MULTIPLE:
            return value in values
        if kind is FieldKind.RANGE:
            return len(values) == 2 and values[0] <= value <= values[1]
        if kind is FieldKind.STEP:
            if len(values) != 1 or values[0] <= 0:
                return False
            return value % values[0] == 0
        # TODO: give ANY real semantics (Quartz-style "no specific value")
        return False

    def describe(self, name: str) -> str:
        """English clause for this field, e.g. ``"every 5 hours"``."""
        kind = self.kind
        if kind is FieldKind.EXACT:
            return f"at {name} {self.values[0]}"
        if kind is FieldKind.EVERY:
            return f"every {name}"
        if kind is FieldKind.STEP:
            return f"every {self.values[0]} {name}s"
        if kind is FieldKind.RANGE:
            return f"from {name} {self.values[0]} to {self.values[1]}"
        if kind is FieldKind.MULTIPLE:
            return f"at {name}s {', '.join(str(v) for v in self.values)}"
        if kind is FieldKind.ANY:
            return f"any {name}"
        return f"unknown {name}"
