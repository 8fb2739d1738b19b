#!/usr/bin/env python3
"""Clock synchronisation example for bleconv.

This example demonstrates:
1. Reading the current time in a zone
2. Encoding the Current Time and Local Time Information buffers
3. Joining them behind a device-specific command header
"""

from __future__ import annotations

from zoneinfo import ZoneInfo

from bleconv import (
    calendar_to_local_time_bytes,
    calendar_to_raw_bytes,
    from_uint16,
    join,
    now,
)

# Hypothetical "set time" opcode of a wearable
SET_TIME_OPCODE = 0x0104


def main() -> None:
    """Run the clock synchronisation example."""
    print("=" * 60)
    print("bleconv Clock Sync Example")
    print("=" * 60)
    print()

    print("1. Reading the current time in Europe/Berlin...")
    ts = now(ZoneInfo("Europe/Berlin"))
    print(
        f"   {ts.year:04d}-{ts.month:02d}-{ts.day:02d} "
        f"{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}"
    )
    print(f"   Raw offset: {ts.raw_offset_ms // 60000} min, DST active: {ts.in_daylight_time}")
    print()

    print("2. Encoding characteristic buffers...")
    current_time = calendar_to_raw_bytes(ts)
    local_time_info = calendar_to_local_time_bytes(ts)
    print(f"   Current Time ({len(current_time)} bytes): {current_time.hex(' ')}")
    print(f"   Local Time Info ({len(local_time_info)} bytes): {local_time_info.hex(' ')}")
    print()

    print("3. Building a device command...")
    command = join(join(from_uint16(SET_TIME_OPCODE), current_time), local_time_info)
    assert command is not None
    print(f"   Command ({len(command)} bytes): {command.hex(' ')}")


if __name__ == "__main__":
    main()
