"""Formatting boundary for cyclic time values.

A time of day carries no date, so rendering is delegated to a calendar
formatting engine. The engine receives the wall-clock fields and a pattern
and returns a string. Engines place the fields on a synthetic timestamp at
ANCHOR_DATE in ANCHOR_TZINFO, so any date directive in a pattern renders
1970-01-01 with a zero UTC offset.

Engines:
- StrftimeFormatter: datetime.strftime patterns (the default)
- IsoFormatter: ISO 8601 / RFC 3339 rendering, pattern selects the timespec

Other grammars (PHP date() patterns such as "H:i:s.u", moment-style tokens)
are supported by passing any object with a matching format() method.

Examples:
    >>> StrftimeFormatter().format(WallClock(1, 2, 3, 4), "%H:%M:%S.%f")
    '01:02:03.000004'
    >>> IsoFormatter().format(WallClock(1, 2, 3, 4), "milliseconds")
    '1970-01-01T01:02:03.000+00:00'
"""

from __future__ import annotations

from datetime import datetime, time
from typing import NamedTuple, Protocol, runtime_checkable

from .common import ANCHOR_DATE, ANCHOR_TZINFO


class WallClock(NamedTuple):
    """Wall-clock fields handed to a formatting engine."""

    hour: int
    minute: int
    second: int
    microsecond: int

    def anchored(self) -> datetime:
        """Place the fields on the anchor date in the anchor zone."""
        return datetime.combine(ANCHOR_DATE, time(*self), tzinfo=ANCHOR_TZINFO)


@runtime_checkable
class TimeFormatter(Protocol):
    """Anything able to render wall-clock fields against a pattern."""

    def format(self, wall_clock: WallClock, pattern: str) -> str: ...


class StrftimeFormatter:
    """Render patterns with datetime.strftime on the anchored timestamp."""

    def format(self, wall_clock: WallClock, pattern: str) -> str:
        return wall_clock.anchored().strftime(pattern)

    def __repr__(self) -> str:
        return "StrftimeFormatter()"


class IsoFormatter:
    """Render the anchored timestamp as ISO 8601.

    The pattern is a datetime.isoformat timespec ("auto", "hours", "minutes",
    "seconds", "milliseconds", "microseconds"). An empty pattern means "auto".
    With "milliseconds" the output is the RFC 3339 extended form.

    Raises:
        ValueError: If the pattern is not a known timespec
    """

    separator: str

    def __init__(self, separator: str = "T") -> None:
        self.separator = separator

    def format(self, wall_clock: WallClock, pattern: str) -> str:
        return wall_clock.anchored().isoformat(sep=self.separator, timespec=pattern or "auto")

    def __repr__(self) -> str:
        return f"IsoFormatter(separator={self.separator!r})"


# Engine used by CyclicTime.format when none is passed
DEFAULT_FORMATTER: TimeFormatter = StrftimeFormatter()
