"""Main CLI entry point for bleconv."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from typing import Optional

from .. import __version__
from ..config import TimeSyncConfig
from ..exceptions import BleConvError, TimestampError
from ..log import configure_logging, get_logger
from ..time_codec import (
    calendar_to_exact_time_bytes,
    calendar_to_local_time_bytes,
    calendar_to_raw_bytes,
    short_calendar_to_raw_bytes,
)
from ..timestamp import ZonedTimestamp, now


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the bleconv CLI."""
    parser = argparse.ArgumentParser(
        prog="bleconv",
        description="bleconv: BLE time characteristic encoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bleconv                                   Encode the current local time
  bleconv --tz Europe/Berlin                Encode the current time in Berlin
  bleconv --at 2023-03-15T14:30:45 --tz UTC Encode a fixed instant
        """,
    )

    parser.add_argument("--tz", metavar="ZONE", help="IANA timezone name (default: host zone)")
    parser.add_argument(
        "--at",
        metavar="ISO8601",
        help="Instant to encode instead of now; naive values are read in --tz",
    )
    parser.add_argument(
        "--short", action="store_true", help="Encode only up to the minutes (6 bytes)"
    )
    parser.add_argument(
        "--fractions",
        metavar="N",
        type=int,
        default=None,
        help="Append a fractions256 byte (Exact Time 256 layout); not valid with --short",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug events to stderr")
    parser.add_argument("--version", action="version", version=f"bleconv {__version__}")
    return parser


def resolve_timestamp(config: TimeSyncConfig, at: Optional[str]) -> ZonedTimestamp:
    """Return the timestamp to encode for the given settings.

    Raises:
        TimestampError: If the zone is unknown or ``at`` cannot be parsed
    """
    tz = config.resolve_tz()
    if at is None:
        return now(tz)

    try:
        value = datetime.fromisoformat(at)
    except ValueError as e:
        raise TimestampError(f"Invalid ISO 8601 timestamp: {at}") from e

    if value.tzinfo is None:
        if tz is None:
            raise TimestampError("--at without a UTC offset requires --tz")
        value = value.replace(tzinfo=tz)
    elif tz is not None:
        value = value.astimezone(tz)

    return ZonedTimestamp.from_datetime(value)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the bleconv CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = build_parser().parse_args(argv)
    if args.short and args.fractions is not None:
        print("Error: --fractions cannot be combined with --short", file=sys.stderr)
        return 1

    configure_logging("DEBUG" if args.verbose else "WARNING")
    log = get_logger("bleconv.cli")

    try:
        config = TimeSyncConfig(
            timezone=args.tz,
            short_format=args.short,
            fractions256=args.fractions or 0,
        )
        timestamp = resolve_timestamp(config, args.at)
    except (BleConvError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log.debug(
        "timestamp_resolved",
        timezone=config.timezone,
        raw_offset_ms=timestamp.raw_offset_ms,
        dst_savings_ms=timestamp.dst_savings_ms,
        in_daylight_time=timestamp.in_daylight_time,
    )

    if config.short_format:
        time_bytes = short_calendar_to_raw_bytes(timestamp, config.honor_device_time_offset)
    elif args.fractions is not None:
        time_bytes = calendar_to_exact_time_bytes(timestamp, config.fractions256)
    else:
        time_bytes = calendar_to_raw_bytes(timestamp, config.honor_device_time_offset)
    local_time_bytes = calendar_to_local_time_bytes(timestamp)

    log.debug("encoded", time=time_bytes.hex(), local_time_info=local_time_bytes.hex())

    print(f"time: {time_bytes.hex(' ')}")
    print(f"local_time_info: {local_time_bytes.hex(' ')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
