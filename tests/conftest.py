"""Shared test fixtures for pyCyclicTime tests."""

from __future__ import annotations

import pytest

from cyclictime import CyclicTime

# (hour, minute, second, microsecond) samples covering both ends of the cycle
SAMPLE_FIELDS = [
    (1, 1, 1, 1),
    (0, 0, 0, 0),
    (23, 59, 59, 999999),
    (0, 0, 0, 1),
    (5, 10, 20, 100),
]

SAMPLE_IDS = [
    "ones",
    "midnight",
    "just_before_midnight",
    "just_after_midnight",
    "some_time",
]


@pytest.fixture(params=SAMPLE_FIELDS, ids=SAMPLE_IDS)
def fields(request: pytest.FixtureRequest) -> tuple[int, int, int, int]:
    """Valid wall-clock fields."""
    return request.param


@pytest.fixture
def sample_time(fields: tuple[int, int, int, int]) -> CyclicTime:
    """A CyclicTime built from each set of sample fields."""
    return CyclicTime(*fields)

