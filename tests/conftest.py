"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from bleconv.timestamp import MS_PER_HOUR, Weekday, ZonedTimestamp


@pytest.fixture
def wednesday() -> ZonedTimestamp:
    """2023-03-15 14:30:45, a Wednesday, in UTC."""
    return ZonedTimestamp(
        year=2023,
        month=3,
        day=15,
        hour=14,
        minute=30,
        second=45,
        day_of_week=Weekday.WEDNESDAY,
    )


@pytest.fixture
def summer_berlin() -> ZonedTimestamp:
    """Summer instant in a UTC+1 zone with one hour of DST in effect."""
    return ZonedTimestamp(
        year=2023,
        month=7,
        day=1,
        hour=9,
        minute=0,
        second=0,
        day_of_week=Weekday.SATURDAY,
        raw_offset_ms=MS_PER_HOUR,
        dst_savings_ms=MS_PER_HOUR,
        in_daylight_time=True,
    )
