"""Unit tests for the formatting boundary."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from cyclictime import (
    CyclicTime,
    IsoFormatter,
    StrftimeFormatter,
    TimeFormatter,
    WallClock,
)
from cyclictime.formatting import DEFAULT_FORMATTER


class RecordingFormatter:
    """Formatter that records its calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[WallClock, str]] = []

    def format(self, wall_clock: WallClock, pattern: str) -> str:
        self.calls.append((wall_clock, pattern))
        return "recorded"


@pytest.mark.unit
class TestWallClock:
    """Test the WallClock tuple."""

    def test_anchored(self) -> None:
        """Test that fields are placed on 1970-01-01 UTC."""
        assert WallClock(1, 2, 3, 4).anchored() == datetime(1970, 1, 1, 1, 2, 3, 4, tzinfo=UTC)

    def test_from_cyclic_time(self) -> None:
        """Test the wall_clock view of a CyclicTime."""
        assert CyclicTime(5, 10, 20, 100).wall_clock == WallClock(5, 10, 20, 100)


@pytest.mark.unit
class TestStrftimeFormatter:
    """Test StrftimeFormatter."""

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("%H:%M:%S.%f", "01:02:03.000004"),
            ("%H:%M", "01:02"),
            ("%I %p", "01 AM"),
            ("%Y-%m-%dT%H:%M:%S%z", "1970-01-01T01:02:03+0000"),
            ("%Z", "UTC"),
            ("", ""),
        ],
        ids=["full", "short", "twelve_hour", "with_anchor_date", "zone_name", "empty"],
    )
    def test_format(self, pattern: str, expected: str) -> None:
        """Test strftime rendering of 01:02:03.000004."""
        assert StrftimeFormatter().format(WallClock(1, 2, 3, 4), pattern) == expected

    def test_is_time_formatter(self) -> None:
        """Test protocol conformance."""
        assert isinstance(StrftimeFormatter(), TimeFormatter)


@pytest.mark.unit
class TestIsoFormatter:
    """Test IsoFormatter."""

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("milliseconds", "1970-01-01T01:02:03.000+00:00"),
            ("seconds", "1970-01-01T01:02:03+00:00"),
            ("microseconds", "1970-01-01T01:02:03.000004+00:00"),
            ("", "1970-01-01T01:02:03.000004+00:00"),
            ("minutes", "1970-01-01T01:02+00:00"),
        ],
        ids=["rfc3339_extended", "seconds", "microseconds", "auto", "minutes"],
    )
    def test_format(self, pattern: str, expected: str) -> None:
        """Test ISO rendering for each timespec."""
        assert IsoFormatter().format(WallClock(1, 2, 3, 4), pattern) == expected

    def test_separator(self) -> None:
        """Test a custom date/time separator."""
        assert IsoFormatter(" ").format(WallClock(12, 0, 0, 0), "seconds") == "1970-01-01 12:00:00+00:00"

    def test_unknown_timespec(self) -> None:
        """Test that unknown timespecs raise ValueError."""
        with pytest.raises(ValueError):
            IsoFormatter().format(WallClock(0, 0, 0, 0), "H:i:s")


@pytest.mark.unit
class TestDefaultFormatter:
    """Test the engine used when no formatter is passed."""

    def test_default_is_strftime(self) -> None:
        """Test that strftime is the default engine."""
        assert isinstance(DEFAULT_FORMATTER, StrftimeFormatter)
        assert CyclicTime(1, 2, 3, 4).format("%H:%M:%S.%f") == "01:02:03.000004"

    def test_explicit_formatter_is_used(self) -> None:
        """Test that a per-call formatter receives the wall clock and pattern."""
        recorder = RecordingFormatter()

        assert CyclicTime(1, 2, 3, 4).format("pattern", formatter=recorder) == "recorded"
        assert recorder.calls == [(WallClock(1, 2, 3, 4), "pattern")]

    def test_explicit_formatter_does_not_leak(self) -> None:
        """Test that using another engine once leaves later default calls unchanged."""
        t = CyclicTime(1, 2, 3, 4)

        t.format("milliseconds", formatter=IsoFormatter())
        t.format("anything", formatter=RecordingFormatter())

        assert t.format("%H:%M:%S.%f") == "01:02:03.000004"
        assert t.format("%H:%M:%S.%f") == t.format("%H:%M:%S.%f", formatter=StrftimeFormatter())
