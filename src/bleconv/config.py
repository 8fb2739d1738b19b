"""Configuration for clock synchronisation runs.

This module provides the settings the command line tool uses to pick a
timezone and the time buffer layout to send to a device.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import TimestampError


@dataclass
class TimeSyncConfig:
    """Settings for encoding the current time for a device.

    Attributes:
        timezone: IANA zone name (e.g. "Europe/Berlin"), None for the host zone
        honor_device_time_offset: Passed through to the time encoders
        short_format: Encode only up to the minutes (6 bytes) instead of 8
        fractions256: Fractions of a second for the Exact Time 256 layout, 0-255

    Examples:
        ```python
        from bleconv.config import TimeSyncConfig

        config = TimeSyncConfig(timezone="America/New_York", short_format=True)
        tz = config.resolve_tz()
        ```
    """

    timezone: Optional[str] = None
    honor_device_time_offset: bool = False
    short_format: bool = False
    fractions256: int = 0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 0 <= self.fractions256 <= 255:
            raise ValueError(f"fractions256 must be 0-255, got {self.fractions256}")

        if self.timezone is not None and not self.timezone:
            raise ValueError("timezone must be a zone name or None")

    def resolve_tz(self) -> Optional[tzinfo]:
        """Look up the configured zone.

        Returns:
            ZoneInfo for the configured name, or None for the host zone

        Raises:
            TimestampError: If the zone name is unknown
        """
        if self.timezone is None:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise TimestampError(f"Unknown timezone: {self.timezone}") from e
