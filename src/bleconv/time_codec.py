"""Encoders for the BLE Current Time Service characteristics.

Layouts (all multi-byte integers little-endian):

    Date Time + Day of Week   year(2) month day hour minute second day_of_week
    Exact Time 256            the above + fractions256
    Local Time Information    time_zone(sint8, 15 min units) dst_offset(uint8)

See:
    https://www.bluetooth.com/specifications/gatt/viewer?attributeXmlFile=org.bluetooth.characteristic.time_zone.xml
    https://www.bluetooth.com/specifications/gatt/viewer?attributeXmlFile=org.bluetooth.characteristic.dst_offset.xml
"""

from __future__ import annotations

from typing import Union

from .integers import from_uint8, from_uint16, truncate, truncate_signed
from .timestamp import MS_PER_HOUR, MS_PER_MINUTE, Weekday, ZonedTimestamp

QUARTER_HOURS_PER_HOUR = 4
MINUTES_PER_QUARTER_HOUR = 15

# Protocol weekday numbering: Monday=1 .. Sunday=7
PROTOCOL_SUNDAY = 7

DST_OFFSET_NONE = 0
DST_OFFSET_UNKNOWN = 255

# DST savings in minutes -> DST Offset characteristic code
DST_OFFSET_CODES: dict[int, int] = {
    30: 2,  # half an hour daylight time
    60: 4,  # daylight time
    120: 8,  # double daylight time
}


def _div_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def _date_time_prefix(timestamp: ZonedTimestamp) -> bytes:
    return from_uint16(timestamp.year) + bytes(
        [
            from_uint8(timestamp.month),
            from_uint8(timestamp.day),
            from_uint8(timestamp.hour),
            from_uint8(timestamp.minute),
        ]
    )


def calendar_to_raw_bytes(
    timestamp: ZonedTimestamp, honor_device_time_offset: bool = False
) -> bytes:
    """Encode a timestamp as Date Time + Day of Week (8 bytes).

    Args:
        timestamp: Instant to encode
        honor_device_time_offset: Accepted for caller compatibility, has no effect

    Returns:
        ``[year_lo, year_hi, month, day, hour, minute, second, day_of_week]``

    Example:
        >>> calendar_to_raw_bytes(ts).hex(" ")
        'e7 07 03 0f 0e 1e 2d 03'
    """
    return _date_time_prefix(timestamp) + bytes(
        [from_uint8(timestamp.second), day_of_week_to_raw_bytes(timestamp)]
    )


def short_calendar_to_raw_bytes(
    timestamp: ZonedTimestamp, honor_device_time_offset: bool = False
) -> bytes:
    """Encode a timestamp up to and including the minutes (6 bytes).

    Args:
        timestamp: Instant to encode
        honor_device_time_offset: Accepted for caller compatibility, has no effect

    Returns:
        ``[year_lo, year_hi, month, day, hour, minute]``
    """
    return _date_time_prefix(timestamp)


def calendar_to_exact_time_bytes(timestamp: ZonedTimestamp, fractions256: int = 0) -> bytes:
    """Encode a timestamp as Exact Time 256 (9 bytes).

    Args:
        timestamp: Instant to encode
        fractions256: Fractions of a second in 1/256 units, 0 when unset

    Returns:
        The 8-byte full time followed by the fractions byte
    """
    return calendar_to_raw_bytes(timestamp) + bytes([from_uint8(fractions256)])


def day_of_week_to_raw_bytes(value: Union[ZonedTimestamp, Weekday, int]) -> int:
    """Map a Sunday-first weekday to protocol numbering (Monday=1 .. Sunday=7).

    Args:
        value: Timestamp, or weekday in Sunday-first convention (Sunday=1)

    Returns:
        Protocol day of week

    Example:
        >>> day_of_week_to_raw_bytes(Weekday.SUNDAY)
        7
        >>> day_of_week_to_raw_bytes(Weekday.MONDAY)
        1
    """
    weekday = value.day_of_week if isinstance(value, ZonedTimestamp) else value
    if weekday == Weekday.SUNDAY:
        return PROTOCOL_SUNDAY
    return from_uint8(int(weekday) - 1)


def map_time_zone(raw_offset_ms: int) -> int:
    """Encode a raw UTC offset as the Time Zone characteristic value.

    Only whole hours are kept (division truncates toward zero). The result
    is in 15 minute units and wraps through a signed byte, so offsets outside
    -48..+56 are not clamped.

    Args:
        raw_offset_ms: Standard UTC offset in milliseconds

    Returns:
        Signed 8-bit value

    Example:
        >>> map_time_zone(-5 * 3_600_000)
        -20
    """
    offset_hours = _div_toward_zero(raw_offset_ms, MS_PER_HOUR)
    return truncate_signed(offset_hours * QUARTER_HOURS_PER_HOUR, 8)


def map_dst_offset(timestamp: ZonedTimestamp) -> int:
    """Encode the DST Offset characteristic value for an instant.

    A zone without DST and a zone whose DST is not in effect both give 0.

    Returns:
        0 if no DST applies, 2/4/8 for 30/60/120 minutes, 255 if unknown
    """
    if timestamp.dst_savings_ms == 0:
        return DST_OFFSET_NONE
    if not timestamp.in_daylight_time:
        return DST_OFFSET_NONE

    dst_minutes = _div_toward_zero(timestamp.dst_savings_ms, MS_PER_MINUTE)
    return DST_OFFSET_CODES.get(dst_minutes, DST_OFFSET_UNKNOWN)


def calendar_to_local_time_bytes(timestamp: ZonedTimestamp) -> bytes:
    """Encode the Local Time Information characteristic (2 bytes)."""
    return bytes(
        [
            truncate(map_time_zone(timestamp.raw_offset_ms), 8),
            map_dst_offset(timestamp),
        ]
    )


def mi_band2_time_zone(raw_offset_ms: int) -> int:
    """Encode a UTC offset in quarter hours, keeping sub-hour remainders.

    Unlike map_time_zone(), leftover minutes count as whole quarter hours,
    so +5:30 gives 22 here and 20 there.

    Example:
        >>> mi_band2_time_zone(int(5.5 * 3_600_000))
        22
    """
    offset_minutes = _div_toward_zero(raw_offset_ms, MS_PER_MINUTE)
    sign = -1 if offset_minutes < 0 else 1
    offset_minutes = abs(offset_minutes)
    offset_hours = offset_minutes // 60
    return sign * (
        offset_minutes % 60 // MINUTES_PER_QUARTER_HOUR + offset_hours * QUARTER_HOURS_PER_HOUR
    )
