"""Little-endian unsigned integer codecs.

Values wider than their target field are masked down to the field width
rather than rejected. Multi-byte values are always least significant byte
first.
"""

from __future__ import annotations

from typing import Optional, Union

from .exceptions import DecodeError

BytesLike = Union[bytes, bytearray, memoryview]


def truncate(value: int, bits: int) -> int:
    """Keep only the low ``bits`` bits of ``value``.

    Args:
        value: Integer to truncate (may be negative or wider than ``bits``)
        bits: Target field width in bits

    Returns:
        Unsigned value in range 0 .. 2**bits - 1

    Example:
        >>> truncate(0x1FF, 8)
        255
        >>> truncate(-1, 16)
        65535
    """
    return value & ((1 << bits) - 1)


def truncate_signed(value: int, bits: int) -> int:
    """Truncate ``value`` to ``bits`` bits and read it back as two's complement.

    Example:
        >>> truncate_signed(-20, 8)
        -20
        >>> truncate_signed(200, 8)
        -56
    """
    unsigned_value = truncate(value, bits)
    if unsigned_value & (1 << (bits - 1)):
        return unsigned_value - (1 << bits)
    return unsigned_value


def _to_le_bytes(value: int, num_bytes: int) -> bytes:
    return truncate(value, num_bytes * 8).to_bytes(num_bytes, "little")


def from_uint8(value: int) -> int:
    """Mask ``value`` to a single byte."""
    return truncate(value, 8)


def from_uint16(value: int) -> bytes:
    """Encode ``value`` as 2 little-endian bytes.

    Example:
        >>> from_uint16(2023)
        b'\\xe7\\x07'
    """
    return _to_le_bytes(value, 2)


def from_uint24(value: int) -> bytes:
    """Encode ``value`` as 3 little-endian bytes."""
    return _to_le_bytes(value, 3)


def from_uint32(value: int) -> bytes:
    """Encode ``value`` as 4 little-endian bytes."""
    return _to_le_bytes(value, 4)


def _from_le_bytes(data: tuple, num_bytes: int) -> int:
    # Accept either to_uint16(b0, b1) or to_uint16(b"\x01\x02")
    if len(data) == 1 and isinstance(data[0], (bytes, bytearray, memoryview)):
        values = list(data[0])
    else:
        values = [int(b) for b in data]

    if len(values) < num_bytes:
        raise DecodeError(f"Not enough bytes: need {num_bytes}, have {len(values)}")

    result = 0
    for i in range(num_bytes):
        result |= (values[i] & 0xFF) << (8 * i)
    return result


def to_uint16(*data: int | BytesLike) -> int:
    """Decode the first two bytes as a little-endian unsigned 16-bit value.

    Args:
        *data: Individual byte values, or a single bytes-like buffer

    Returns:
        Value in range 0-65535

    Raises:
        DecodeError: If fewer than 2 bytes are supplied

    Example:
        >>> to_uint16(0xE7, 0x07)
        2023
        >>> to_uint16(b"\\xe7\\x07")
        2023
    """
    return _from_le_bytes(data, 2)


def to_uint24(*data: int | BytesLike) -> int:
    """Decode the first three bytes as a little-endian unsigned 24-bit value."""
    return _from_le_bytes(data, 3)


def to_uint32(*data: int | BytesLike) -> int:
    """Decode the first four bytes as a little-endian unsigned 32-bit value."""
    return _from_le_bytes(data, 4)


def join(start: Optional[bytes], end: Optional[bytes]) -> Optional[bytes]:
    """Concatenate two byte buffers without modifying either.

    If one operand is None or empty the other is returned as-is.

    Args:
        start: Leading bytes
        end: Trailing bytes

    Returns:
        ``start`` followed by ``end``

    Example:
        >>> join(b"\\x01", b"\\x02\\x03")
        b'\\x01\\x02\\x03'
        >>> join(None, b"\\x02")
        b'\\x02'
    """
    if not start:
        return end
    if not end:
        return start
    return bytes(start) + bytes(end)
