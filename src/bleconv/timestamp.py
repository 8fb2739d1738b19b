"""Calendar value type consumed by the time codecs.

ZonedTimestamp carries the calendar fields of an instant together with the
timezone facts the BLE time characteristics need: the standard (raw) UTC
offset, the zone's DST savings and whether DST is in effect right now.
"""

from __future__ import annotations

import enum
import time
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import TimestampError

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


class Weekday(enum.IntEnum):
    """Day of week in the Sunday-first calendar convention (Sunday=1)."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @classmethod
    def from_date(cls, value: date) -> Weekday:
        """Return the weekday of a date or datetime.

        Example:
            >>> Weekday.from_date(date(2023, 3, 15))
            <Weekday.WEDNESDAY: 4>
        """
        # isoweekday(): Monday=1 .. Sunday=7
        return cls(value.isoweekday() % 7 + 1)


def _ms(delta: Optional[timedelta]) -> int:
    if delta is None:
        return 0
    return (delta.days * 86400 + delta.seconds) * MS_PER_SECOND + delta.microseconds // 1000


class ZonedTimestamp(BaseModel):
    """A calendar instant with its timezone facts.

    Calendar fields are not range checked: encoders truncate them to the
    width of their wire field.

    Attributes:
        year: Calendar year
        month: Month of year, 1-12
        day: Day of month
        hour: Hour of day, 0-23
        minute: Minute of hour
        second: Second of minute
        day_of_week: Weekday (Sunday-first convention)
        raw_offset_ms: Standard UTC offset in milliseconds, without DST
        dst_savings_ms: DST amount of the zone in milliseconds, 0 if the zone has no DST
        in_daylight_time: Whether DST is in effect at this instant

    Example:
        >>> ts = ZonedTimestamp(
        ...     year=2023, month=3, day=15, hour=14, minute=30, second=45,
        ...     day_of_week=Weekday.WEDNESDAY,
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    day_of_week: Weekday
    raw_offset_ms: int = 0
    dst_savings_ms: int = 0
    in_daylight_time: bool = False

    @classmethod
    def from_datetime(
        cls, value: datetime, dst_savings_ms: Optional[int] = None
    ) -> ZonedTimestamp:
        """Build a timestamp from a timezone-aware datetime.

        The zone's offset is sampled at ``value`` and on January 1 and July 1
        of the same year. The smallest offset is the raw (standard) offset
        and the spread between smallest and largest is the DST savings. DST
        is in effect when the offset at ``value`` exceeds the raw offset.
        ``dst()`` is not used: zones such as Europe/Dublin report a negative
        ``dst()`` in winter.

        Args:
            value: Aware datetime
            dst_savings_ms: Override for the zone's DST savings

        Returns:
            ZonedTimestamp for ``value``

        Raises:
            TimestampError: If ``value`` has no timezone
        """
        tz = value.tzinfo
        if tz is None or value.utcoffset() is None:
            raise TimestampError(f"datetime must be timezone-aware, got {value!r}")

        offset_ms = _ms(value.utcoffset())
        offsets = [offset_ms, *_probe_offsets(tz, value.year)]
        raw_offset_ms = min(offsets)

        if dst_savings_ms is None:
            dst_savings_ms = max(offsets) - raw_offset_ms

        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            day_of_week=Weekday.from_date(value),
            raw_offset_ms=raw_offset_ms,
            dst_savings_ms=dst_savings_ms,
            in_daylight_time=offset_ms > raw_offset_ms,
        )


def _probe_offsets(tz: tzinfo, year: int) -> list[int]:
    probes = (datetime(year, 1, 1, 12, tzinfo=tz), datetime(year, 7, 1, 12, tzinfo=tz))
    return [_ms(probe.utcoffset()) for probe in probes]


def now(tz: Optional[tzinfo] = None) -> ZonedTimestamp:
    """Return the current time as a ZonedTimestamp.

    Args:
        tz: Zone to read the time in; None uses the host's local zone

    Returns:
        ZonedTimestamp for the current instant
    """
    if tz is not None:
        return ZonedTimestamp.from_datetime(datetime.now(tz))

    local = time.localtime()
    raw_offset_ms = -time.timezone * MS_PER_SECOND
    dst_savings_ms = (time.timezone - time.altzone) * MS_PER_SECOND if time.daylight else 0
    return ZonedTimestamp(
        year=local.tm_year,
        month=local.tm_mon,
        day=local.tm_mday,
        hour=local.tm_hour,
        minute=local.tm_min,
        second=local.tm_sec,
        # tm_wday: Monday=0 .. Sunday=6
        day_of_week=Weekday((local.tm_wday + 1) % 7 + 1),
        raw_offset_ms=raw_offset_ms,
        dst_savings_ms=dst_savings_ms,
        in_daylight_time=local.tm_isdst > 0,
    )
