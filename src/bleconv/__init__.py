"""bleconv: BLE time and integer codecs

Encoders for the Bluetooth Low Energy Current Time Service characteristics
(Date Time, Day of Week, Exact Time 256, Local Time Information) and small
little-endian integer codecs for assembling device packets.

Quick Start:
    >>> from datetime import datetime
    >>> from zoneinfo import ZoneInfo
    >>> from bleconv import ZonedTimestamp, calendar_to_raw_bytes, calendar_to_local_time_bytes
    >>>
    >>> ts = ZonedTimestamp.from_datetime(
    ...     datetime(2023, 3, 15, 14, 30, 45, tzinfo=ZoneInfo("Europe/Berlin"))
    ... )
    >>> calendar_to_raw_bytes(ts).hex(" ")
    'e7 07 03 0f 0e 1e 2d 03'
    >>> calendar_to_local_time_bytes(ts).hex(" ")
    '04 00'
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import TimeSyncConfig
from .exceptions import BleConvError, DecodeError, TimestampError
from .integers import (
    from_uint8,
    from_uint16,
    from_uint24,
    from_uint32,
    join,
    to_uint16,
    to_uint24,
    to_uint32,
    truncate,
    truncate_signed,
)
from .time_codec import (
    calendar_to_exact_time_bytes,
    calendar_to_local_time_bytes,
    calendar_to_raw_bytes,
    day_of_week_to_raw_bytes,
    map_dst_offset,
    map_time_zone,
    short_calendar_to_raw_bytes,
)
from .timestamp import Weekday, ZonedTimestamp, now

__all__ = [
    # Time values
    "ZonedTimestamp",
    "Weekday",
    "now",
    # Time codecs
    "calendar_to_raw_bytes",
    "short_calendar_to_raw_bytes",
    "calendar_to_exact_time_bytes",
    "calendar_to_local_time_bytes",
    "day_of_week_to_raw_bytes",
    "map_time_zone",
    "map_dst_offset",
    # Integer codecs
    "truncate",
    "truncate_signed",
    "from_uint8",
    "from_uint16",
    "from_uint24",
    "from_uint32",
    "to_uint16",
    "to_uint24",
    "to_uint32",
    "join",
    # Configuration
    "TimeSyncConfig",
    # Exceptions
    "BleConvError",
    "DecodeError",
    "TimestampError",
    # Version
    "__version__",
]
