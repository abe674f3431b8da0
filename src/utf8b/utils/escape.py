"""Helpers for UTF-8b escape values.

An escape value is a scalar in U+DC80-U+DCFF standing for one raw byte in
0x80-0xFF that was not part of a valid UTF-8 sequence.
"""

from __future__ import annotations

from ..codec.units import ESCAPE_BASE, ESCAPE_END, ESCAPE_MIN


def is_escape(scalar: int) -> bool:
    """Check whether a scalar value is a UTF-8b escape value."""
    return ESCAPE_MIN <= scalar < ESCAPE_END


def escape_byte(byte: int) -> int:
    """Return the escape value standing for a raw byte.

    Args:
        byte: Raw byte value (0x80-0xFF)

    Returns:
        Escape value (0xDC80-0xDCFF)

    Raises:
        ValueError: If the byte is not in 0x80-0xFF

    Example:
        >>> hex(escape_byte(0xFF))
        '0xdcff'
    """
    if not 0x80 <= byte <= 0xFF:
        raise ValueError(f"Only bytes 0x80-0xFF can be escaped, got 0x{byte:X}")
    return ESCAPE_BASE | byte


def escaped_byte(scalar: int) -> int:
    """Return the raw byte an escape value stands for.

    Raises:
        ValueError: If the scalar is not an escape value
    """
    if not is_escape(scalar):
        raise ValueError(f"0x{scalar:X} is not a UTF-8b escape value")
    return scalar & 0xFF
