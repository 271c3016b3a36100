"""Cyclic time of day value.

This module contains the CyclicTime class, an immutable o'clock value on a
recurring 24-hour wheel with microsecond precision:
- Canonical representation as microseconds since midnight
- Field construction and validation (hour, minute, second, microsecond)
- Cyclic arithmetic modulo 24 hours (add, subtract, shortest distance)
- Conversion to and from datetime objects
- Formatting through a pluggable engine (see formatting.py)

No date, timezone or leap second is modelled.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, tzinfo
from functools import total_ordering
from typing import Any, NoReturn, Protocol, SupportsIndex, final

from .common import (
    ANCHOR_DATE,
    ANCHOR_TZINFO,
    MICROSECONDS_PER_DAY,
    MICROSECONDS_PER_HALF_DAY,
    MICROSECONDS_PER_HOUR,
    MICROSECONDS_PER_MINUTE,
    MICROSECONDS_PER_SECOND,
    TimeField,
)
from .formatting import DEFAULT_FORMATTER, TimeFormatter, WallClock

logger = logging.getLogger(__name__)


class SupportsWallClock(Protocol):
    """Calendar-time object exposing wall-clock fields (datetime, time, ...)."""

    @property
    def hour(self) -> int: ...
    @property
    def minute(self) -> int: ...
    @property
    def second(self) -> int: ...
    @property
    def microsecond(self) -> int: ...


@final
@total_ordering
class CyclicTime:
    """Time of day with microsecond precision. Immutable.

    The only stored state is the number of microseconds since midnight, in
    [0, 86_400_000_000). Every other view is computed from it. To extend the
    type, hold a CyclicTime in a new class rather than subclassing.

    Examples:
        >>> t = CyclicTime(14, 30)
        >>> str(t)
        '14:30:00'
        >>> t.cyclic_add(CyclicTime(12, 0))
        CyclicTime(2, 30, 0, 0)
        >>> CyclicTime(2, 0).calc_distance(CyclicTime(22, 0))
        CyclicTime(4, 0, 0, 0)
    """

    __slots__ = ("_microseconds",)

    _microseconds: int

    min: CyclicTime
    max: CyclicTime

    def __init__(
        self,
        hour: SupportsIndex,
        minute: SupportsIndex,
        second: SupportsIndex = 0,
        microsecond: SupportsIndex = 0,
    ) -> None:
        """Construct from wall-clock fields.

        Args:
            hour: Hour (0-23)
            minute: Minute (0-59)
            second: Second (0-59)
            microsecond: Microsecond (0-999999)

        Raises:
            TypeError: If a field is not integer-like
            OutOfRangeError: If a field is out of bounds (checked in field order)
        """
        hour = TimeField.HOUR.check(hour)
        minute = TimeField.MINUTE.check(minute)
        second = TimeField.SECOND.check(second)
        microsecond = TimeField.MICROSECOND.check(microsecond)

        object.__setattr__(
            self,
            "_microseconds",
            microsecond
            + MICROSECONDS_PER_SECOND * second
            + MICROSECONDS_PER_MINUTE * minute
            + MICROSECONDS_PER_HOUR * hour,
        )

    # ==========================================================================
    # Alternative constructors
    # ==========================================================================

    @classmethod
    def from_microseconds(cls, microseconds: SupportsIndex) -> CyclicTime:
        """Create from a raw count of microseconds since midnight.

        Raises:
            TypeError: If microseconds is not integer-like
            OutOfRangeError: If microseconds is negative or a full day or more
        """
        instance = object.__new__(cls)
        object.__setattr__(instance, "_microseconds", TimeField.MICROSECONDS.check(microseconds))
        return instance

    @classmethod
    def from_datetime(cls, moment: SupportsWallClock) -> CyclicTime:
        """Take the wall-clock fields of a datetime (or time) verbatim.

        The date and the timezone are discarded; no conversion is performed.

        Raises:
            TypeError: If moment does not expose the wall-clock fields
            OutOfRangeError: If the exposed fields are out of bounds
        """
        try:
            hour, minute, second, microsecond = (
                moment.hour,
                moment.minute,
                moment.second,
                moment.microsecond,
            )
        except AttributeError as e:
            raise TypeError(f"Cannot read wall-clock fields from {type(moment).__name__}") from e

        zone = getattr(moment, "tzinfo", None)
        if zone is not None:
            logger.debug("Discarding tzinfo %r of %r", zone, moment)

        return cls(hour, minute, second, microsecond)

    # ==========================================================================
    # Field views
    # ==========================================================================

    @property
    def hour(self) -> int:
        """Hour part (0-23)."""
        return self._microseconds // MICROSECONDS_PER_HOUR

    @property
    def minute(self) -> int:
        """Minute part (0-59)."""
        return self._microseconds % MICROSECONDS_PER_HOUR // MICROSECONDS_PER_MINUTE

    @property
    def second(self) -> int:
        """Second part (0-59)."""
        return self._microseconds % MICROSECONDS_PER_MINUTE // MICROSECONDS_PER_SECOND

    @property
    def microsecond(self) -> int:
        """Microsecond part (0-999999)."""
        return self._microseconds % MICROSECONDS_PER_SECOND

    @property
    def wall_clock(self) -> WallClock:
        """All four fields at once."""
        return WallClock(self.hour, self.minute, self.second, self.microsecond)

    def to_microseconds(self) -> int:
        """Microseconds since midnight, the canonical value."""
        return self._microseconds

    # ==========================================================================
    # Field replacement
    # ==========================================================================

    def replace(
        self,
        hour: SupportsIndex | None = None,
        minute: SupportsIndex | None = None,
        second: SupportsIndex | None = None,
        microsecond: SupportsIndex | None = None,
    ) -> CyclicTime:
        """Return a new value with the given fields replaced.

        Fields left as None keep their current value. Validation is the same
        as for the constructor.
        """
        return type(self)(
            self.hour if hour is None else hour,
            self.minute if minute is None else minute,
            self.second if second is None else second,
            self.microsecond if microsecond is None else microsecond,
        )

    def with_hour(self, hour: SupportsIndex) -> CyclicTime:
        """Return a new value with the given hour."""
        return self.replace(hour=hour)

    def with_minute(self, minute: SupportsIndex) -> CyclicTime:
        """Return a new value with the given minute."""
        return self.replace(minute=minute)

    def with_second(self, second: SupportsIndex) -> CyclicTime:
        """Return a new value with the given second."""
        return self.replace(second=second)

    def with_microsecond(self, microsecond: SupportsIndex) -> CyclicTime:
        """Return a new value with the given microsecond."""
        return self.replace(microsecond=microsecond)

    # ==========================================================================
    # Cyclic arithmetic
    # ==========================================================================

    def cyclic_add(self, other: CyclicTime) -> CyclicTime:
        """Add two times. A sum of 24 hours or more continues from midnight."""
        microseconds = self._microseconds + other.to_microseconds()
        if microseconds >= MICROSECONDS_PER_DAY:
            microseconds -= MICROSECONDS_PER_DAY
        return self.from_microseconds(microseconds)

    def cyclic_subtract(self, other: CyclicTime) -> CyclicTime:
        """Subtract a time. A negative difference is taken back from midnight."""
        microseconds = self._microseconds - other.to_microseconds()
        if microseconds < 0:
            microseconds += MICROSECONDS_PER_DAY
        return self.from_microseconds(microseconds)

    def calc_distance(self, other: CyclicTime) -> CyclicTime:
        """Shortest distance between two times, going either way round.

        The result never exceeds 12 hours and is symmetric in its operands.
        """
        microseconds = abs(self._microseconds - other.to_microseconds())
        if microseconds > MICROSECONDS_PER_HALF_DAY:
            microseconds = MICROSECONDS_PER_DAY - microseconds
        return self.from_microseconds(microseconds)

    def __add__(self, other: object) -> CyclicTime:
        if not isinstance(other, CyclicTime):
            return NotImplemented
        return self.cyclic_add(other)

    def __sub__(self, other: object) -> CyclicTime:
        if not isinstance(other, CyclicTime):
            return NotImplemented
        return self.cyclic_subtract(other)

    # ==========================================================================
    # Conversion and formatting
    # ==========================================================================

    def to_time(self) -> time:
        """Convert to a naive Python time."""
        return time(*self.wall_clock)

    def to_datetime(self, on: date = ANCHOR_DATE, tzinfo: tzinfo | None = ANCHOR_TZINFO) -> datetime:
        """Place this time on a calendar date.

        Args:
            on: Date to use (default 1970-01-01)
            tzinfo: Zone attached verbatim, no conversion (default UTC)
        """
        return datetime.combine(on, self.to_time(), tzinfo=tzinfo)

    def format(self, pattern: str, formatter: TimeFormatter | None = None) -> str:
        """Render through a formatting engine.

        The default engine uses datetime.strftime patterns. Date directives
        render the anchor date 1970-01-01 and the zone is UTC. For another
        grammar, such as PHP date() patterns ("H:i:s.u"), pass a formatter
        implementing it.

        Args:
            pattern: Pattern in the grammar of the engine
            formatter: Engine to use (default: StrftimeFormatter)
        """
        engine = formatter if formatter is not None else DEFAULT_FORMATTER
        return engine.format(self.wall_clock, pattern)

    def isoformat(self) -> str:
        """HH:MM:SS, with .ffffff appended when the microsecond is non-zero."""
        return self.to_time().isoformat()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return self.format(format_spec)

    def __str__(self) -> str:
        return self.isoformat()

    def __repr__(self) -> str:
        return f"CyclicTime({self.hour}, {self.minute}, {self.second}, {self.microsecond})"

    # ==========================================================================
    # Value semantics
    # ==========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CyclicTime):
            return NotImplemented
        return self._microseconds == other._microseconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CyclicTime):
            return NotImplemented
        return self._microseconds < other._microseconds

    def __hash__(self) -> int:
        return hash((CyclicTime, self._microseconds))

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, tuple[int]]:
        return (CyclicTime.from_microseconds, (self._microseconds,))


CyclicTime.min = CyclicTime(0, 0)
CyclicTime.max = CyclicTime(23, 59, 59, 999_999)
