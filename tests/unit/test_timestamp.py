"""Unit tests for ZonedTimestamp construction."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from bleconv.exceptions import TimestampError
from bleconv.time_codec import calendar_to_local_time_bytes
from bleconv.timestamp import MS_PER_HOUR, MS_PER_MINUTE, Weekday, ZonedTimestamp, now


class TestWeekday:
    """Test Sunday-first weekday conversion."""

    def test_from_date(self) -> None:
        """Test a full week starting on Sunday."""
        start = date(2023, 3, 12)  # Sunday
        expected = list(Weekday)

        for i, weekday in enumerate(expected):
            assert Weekday.from_date(start + timedelta(days=i)) is weekday

    def test_values(self) -> None:
        """Test Sunday=1 .. Saturday=7."""
        assert Weekday.SUNDAY == 1
        assert Weekday.MONDAY == 2
        assert Weekday.SATURDAY == 7


class TestZonedTimestamp:
    """Test the value type itself."""

    def test_frozen(self, wednesday: ZonedTimestamp) -> None:
        """Test timestamps are immutable."""
        with pytest.raises(ValidationError):
            wednesday.year = 2024  # type: ignore[misc]

    def test_value_equality(self, wednesday: ZonedTimestamp) -> None:
        """Test equal fields compare equal."""
        assert wednesday == wednesday.model_copy()

    def test_int_weekday_accepted(self) -> None:
        """Test weekday may be given as its integer value."""
        ts = ZonedTimestamp(year=2023, month=1, day=1, hour=0, minute=0, second=0, day_of_week=1)
        assert ts.day_of_week is Weekday.SUNDAY

    def test_invalid_weekday_rejected(self) -> None:
        """Test weekday values outside the enum are rejected."""
        with pytest.raises(ValidationError):
            ZonedTimestamp(year=2023, month=1, day=1, hour=0, minute=0, second=0, day_of_week=8)


class TestFromDatetime:
    """Test building timestamps from aware datetimes."""

    def test_calendar_fields(self) -> None:
        """Test calendar fields are copied."""
        ts = ZonedTimestamp.from_datetime(datetime(2023, 3, 15, 14, 30, 45, tzinfo=timezone.utc))

        assert (ts.year, ts.month, ts.day) == (2023, 3, 15)
        assert (ts.hour, ts.minute, ts.second) == (14, 30, 45)
        assert ts.day_of_week is Weekday.WEDNESDAY
        assert ts.raw_offset_ms == 0
        assert ts.dst_savings_ms == 0
        assert ts.in_daylight_time is False

    def test_fixed_offset_zone(self) -> None:
        """Test a fixed offset has no DST."""
        tz = timezone(timedelta(hours=-5, minutes=-30))
        ts = ZonedTimestamp.from_datetime(datetime(2023, 7, 1, tzinfo=tz))

        assert ts.raw_offset_ms == -(5 * MS_PER_HOUR + 30 * MS_PER_MINUTE)
        assert ts.dst_savings_ms == 0

    def test_dst_active(self) -> None:
        """Test a summer instant in a DST zone."""
        ts = ZonedTimestamp.from_datetime(datetime(2023, 7, 1, 12, tzinfo=ZoneInfo("Europe/Berlin")))

        assert ts.raw_offset_ms == MS_PER_HOUR
        assert ts.dst_savings_ms == MS_PER_HOUR
        assert ts.in_daylight_time is True

    def test_dst_inactive_probes_savings(self) -> None:
        """Test a winter instant still reports the zone's DST savings."""
        ts = ZonedTimestamp.from_datetime(
            datetime(2023, 1, 10, 12, tzinfo=ZoneInfo("America/New_York"))
        )

        assert ts.raw_offset_ms == -5 * MS_PER_HOUR
        assert ts.dst_savings_ms == MS_PER_HOUR
        assert ts.in_daylight_time is False

    def test_negative_dst_zone_winter(self) -> None:
        """Test a zone whose winter dst() is negative reports standard time."""
        ts = ZonedTimestamp.from_datetime(datetime(2023, 1, 10, 12, tzinfo=ZoneInfo("Europe/Dublin")))

        assert ts.raw_offset_ms == 0
        assert ts.dst_savings_ms == MS_PER_HOUR
        assert ts.in_daylight_time is False
        assert calendar_to_local_time_bytes(ts) == b"\x00\x00"

    def test_negative_dst_zone_summer(self) -> None:
        """Test summer in a negative dst() zone is one hour of DST."""
        ts = ZonedTimestamp.from_datetime(datetime(2023, 7, 10, 12, tzinfo=ZoneInfo("Europe/Dublin")))

        assert ts.raw_offset_ms == 0
        assert ts.dst_savings_ms == MS_PER_HOUR
        assert ts.in_daylight_time is True
        assert calendar_to_local_time_bytes(ts) == b"\x00\x04"

    def test_southern_hemisphere(self) -> None:
        """Test DST in January for a southern zone."""
        ts = ZonedTimestamp.from_datetime(
            datetime(2023, 1, 10, 12, tzinfo=ZoneInfo("Australia/Sydney"))
        )

        assert ts.raw_offset_ms == 10 * MS_PER_HOUR
        assert ts.dst_savings_ms == MS_PER_HOUR
        assert ts.in_daylight_time is True

    def test_explicit_savings(self) -> None:
        """Test the savings override is used when DST is inactive."""
        ts = ZonedTimestamp.from_datetime(
            datetime(2023, 1, 10, tzinfo=timezone.utc), dst_savings_ms=30 * MS_PER_MINUTE
        )
        assert ts.dst_savings_ms == 30 * MS_PER_MINUTE

    def test_naive_rejected(self) -> None:
        """Test naive datetimes raise TimestampError."""
        with pytest.raises(TimestampError, match="timezone-aware"):
            ZonedTimestamp.from_datetime(datetime(2023, 1, 1))


class TestNow:
    """Test current time helpers."""

    def test_now_in_zone(self) -> None:
        """Test now() in an explicit zone."""
        ts = now(ZoneInfo("Asia/Tokyo"))

        assert ts.raw_offset_ms == 9 * MS_PER_HOUR
        assert ts.dst_savings_ms == 0
        assert 1 <= ts.month <= 12

    def test_now_local(self) -> None:
        """Test now() in the host zone is self-consistent."""
        ts = now()

        assert 1 <= ts.month <= 12
        assert isinstance(ts.day_of_week, Weekday)
        if ts.dst_savings_ms == 0:
            assert ts.in_daylight_time is False
