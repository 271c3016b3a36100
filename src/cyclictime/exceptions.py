"""Cyclic time exception classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .common import TimeField


class CyclicTimeError(Exception):
    """Base exception for all cyclic time errors."""


class OutOfRangeError(CyclicTimeError, ValueError):
    """A field or raw microsecond count is outside its valid range.

    Attributes:
        field: The offending field
        value: The rejected value
    """

    field: TimeField
    value: int

    def __init__(self, field: TimeField, value: int) -> None:
        from . import common

        self.field = field
        self.value = value
        if field is common.TimeField.MICROSECONDS:
            message = f"Microseconds {value} is out of bounds."
        else:
            message = f"Wrong {field} value: {value}."
        super().__init__(message)
