"""Common constants and field definitions shared across the package.

All constants are expressed in microseconds, the unit of the canonical
representation:

- 1_000_000: a second
- 60_000_000: a minute
- 3_600_000_000: an hour
- 86_400_000_000: a day (one full cycle)
- 43_200_000_000: half a day (the half-cycle threshold)
"""

from __future__ import annotations

import operator
from datetime import UTC, date, tzinfo
from enum import StrEnum
from typing import Any, Self, SupportsIndex

from .exceptions import OutOfRangeError

MICROSECONDS_PER_SECOND = 1_000_000
MICROSECONDS_PER_MINUTE = 60 * MICROSECONDS_PER_SECOND
MICROSECONDS_PER_HOUR = 60 * MICROSECONDS_PER_MINUTE
MICROSECONDS_PER_DAY = 24 * MICROSECONDS_PER_HOUR
MICROSECONDS_PER_HALF_DAY = MICROSECONDS_PER_DAY // 2

# Calendar anchor used whenever a synthetic timestamp is needed
ANCHOR_DATE: date = date(1970, 1, 1)
ANCHOR_TZINFO: tzinfo = UTC


class TimeField(StrEnum):
    """Validated integer fields of a time of day.

    Each member knows its exclusive upper limit; the lower limit is always 0.
    The string value is the field name used in error messages.

    MICROSECONDS is the raw count since midnight rather than a component.
    """

    def __new__(cls, value: str, *args: Any) -> Self:
        obj = str.__new__(cls, value)
        obj._value_ = value
        return obj

    def __init__(self, value: str, limit: int) -> None:
        self._limit = limit

    @property
    def limit(self) -> int:
        """Exclusive upper bound for this field."""
        return self._limit

    def check(self, value: SupportsIndex) -> int:
        """Validate a candidate value and return it as a plain int.

        Raises:
            TypeError: If value is not integer-like
            OutOfRangeError: If value is outside [0, limit)
        """
        number = operator.index(value)
        if not 0 <= number < self._limit:
            raise OutOfRangeError(self, number)
        return number

    HOUR = "hour", 24
    MINUTE = "minute", 60
    SECOND = "second", 60
    MICROSECOND = "microsecond", MICROSECONDS_PER_SECOND
    MICROSECONDS = "microseconds", MICROSECONDS_PER_DAY
