"""
pyCyclicTime: Time of day values on a recurring 24-hour wheel.

This library provides an immutable o'clock type with microsecond precision
and cyclic arithmetic, suitable for recurring schedules, opening hours and
daily events where a full calendar datetime only gets in the way.
"""

from __future__ import annotations

from .common import TimeField
from .exceptions import CyclicTimeError, OutOfRangeError
from .formatting import (
    DEFAULT_FORMATTER,
    IsoFormatter,
    StrftimeFormatter,
    TimeFormatter,
    WallClock,
)
from .value import CyclicTime

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Value type
    "CyclicTime",
    "TimeField",
    # Exceptions
    "CyclicTimeError",
    "OutOfRangeError",
    # Formatting
    "DEFAULT_FORMATTER",
    "IsoFormatter",
    "StrftimeFormatter",
    "TimeFormatter",
    "WallClock",
]
