"""Exception hierarchy for bleconv.

All exceptions inherit from BleConvError for easy catching of any
bleconv-specific error. Field truncation and the DST "unknown" sentinel are
part of the wire format and never raise.
"""

from __future__ import annotations


class BleConvError(Exception):
    """Base exception for all bleconv errors."""

    pass


class DecodeError(BleConvError, IndexError):
    """Raised when a fixed-size decode is given too few bytes.

    Examples:
        - to_uint16() called with a single byte
        - to_uint32() called with a 3-byte buffer
    """

    pass


class TimestampError(BleConvError, ValueError):
    """Raised when a timestamp cannot be built from its source.

    Examples:
        - Naive datetime without tzinfo
        - Unknown IANA timezone name
    """

    pass
