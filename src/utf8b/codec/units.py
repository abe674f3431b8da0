"""Single-unit UTF-8b encoding and decoding.

This module converts one scalar value to its 1-4 byte UTF-8b form and one
UTF-8b sequence back to a scalar value. It knows nothing about ranges of
scalars or bytes beyond the single unit being converted; the sequence-level
functions in ``encoder`` and ``decoder`` build on it.

UTF-8b maps every byte in 0x80-0xFF that is not part of a valid UTF-8
sequence to an escape value in 0xDC80-0xDCFF, so that any byte sequence
decodes to scalar values and encodes back to the same bytes.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

ESCAPE_BASE = 0xDC00
ESCAPE_MIN = 0xDC80
ESCAPE_END = 0xDD00

SURROGATE_MIN = 0xD800
SURROGATE_END = 0xE000

SCALAR_END = 0x110000

MAX_UNIT_LENGTH = 4


class DecodedUnit(NamedTuple):
    """Result of decoding a single UTF-8b sequence.

    Attributes:
        scalar: Decoded scalar value, or None if the sequence is incomplete
        length: Number of bytes consumed. For an incomplete sequence this is
            the number of bytes available, all of which must be retained
    """

    scalar: Optional[int]
    length: int

    @property
    def incomplete(self) -> bool:
        return self.scalar is None


def scalar_utf8b_length(scalar: int) -> int:
    """Return the number of bytes needed to encode a scalar value.

    Only classifies the value; bare surrogates outside the escape range and
    values >= 0x110000 still get a length even though they cannot be encoded.

    Args:
        scalar: Scalar value to classify

    Returns:
        Encoded length in bytes (1-4)
    """
    if scalar < 0x800:
        return 1 if scalar < 0x80 else 2
    if ESCAPE_MIN <= scalar < ESCAPE_END:
        return 1
    return 3 if scalar < 0x10000 else 4


def is_encodable(scalar: int) -> bool:
    """Check whether a scalar value has a UTF-8b encoding."""
    if scalar < 0 or scalar >= SCALAR_END:
        return False
    if SURROGATE_MIN <= scalar < SURROGATE_END:
        return ESCAPE_MIN <= scalar < ESCAPE_END
    return True


def scalar_to_utf8b(scalar: int, output: bytearray, pos: int, end: int) -> int:
    """Encode one scalar value into ``output[pos:end]``.

    Nothing is written unless the whole encoding fits.

    Args:
        scalar: Scalar value to encode
        output: Writable byte buffer
        pos: Position of the first byte to write
        end: Write limit (exclusive)

    Returns:
        Number of bytes written, or 0 if the scalar is not encodable or
        ``end - pos`` is too small
    """
    room = end - pos
    if scalar < 0:
        return 0
    if scalar < 0x80 or ESCAPE_MIN <= scalar < ESCAPE_END:
        if room < 1:
            return 0
        # escape values stand for the raw byte in their low 8 bits
        output[pos] = scalar & 0xFF
        return 1
    if scalar < 0x800:
        if room < 2:
            return 0
        output[pos] = 0xC0 | ((scalar >> 6) & 0x1F)
        output[pos + 1] = 0x80 | (scalar & 0x3F)
        return 2
    if scalar < 0x10000:
        if SURROGATE_MIN <= scalar < SURROGATE_END or room < 3:
            return 0
        output[pos] = 0xE0 | ((scalar >> 12) & 0x0F)
        output[pos + 1] = 0x80 | ((scalar >> 6) & 0x3F)
        output[pos + 2] = 0x80 | (scalar & 0x3F)
        return 3
    if scalar < SCALAR_END:
        if room < 4:
            return 0
        output[pos] = 0xF0 | ((scalar >> 18) & 0x07)
        output[pos + 1] = 0x80 | ((scalar >> 12) & 0x3F)
        output[pos + 2] = 0x80 | ((scalar >> 6) & 0x3F)
        output[pos + 3] = 0x80 | (scalar & 0x3F)
        return 4
    return 0


def _truncated(escaped: DecodedUnit, available: int, end_of_input: bool) -> DecodedUnit:
    if end_of_input:
        return escaped
    return DecodedUnit(None, available)


def utf8b_to_scalar(data: bytes, pos: int, end: int, end_of_input: bool) -> DecodedUnit:
    """Decode the UTF-8b sequence starting at ``data[pos]``.

    Invalid lead bytes, bad continuation bytes, overlong forms, surrogates and
    values above 0x10FFFF escape the lead byte alone; the following bytes are
    examined again by the next call.

    A valid prefix cut short by ``end`` is reported as incomplete when more
    input may arrive (``end_of_input`` false). At end of input it escapes the
    lead byte instead.

    Args:
        data: Byte buffer
        pos: Position of the lead byte
        end: End of the available bytes (exclusive)
        end_of_input: True if no more bytes will follow ``data[end - 1]``

    Returns:
        The decoded unit; ``DecodedUnit(0, 0)`` if no bytes are available
    """
    available = end - pos
    if available <= 0:
        return DecodedUnit(0, 0)

    b0 = data[pos]
    if b0 < 0x80:
        return DecodedUnit(b0, 1)

    escaped = DecodedUnit(ESCAPE_BASE | b0, 1)

    # 0xC0 and 0xC1 can only start overlong sequences
    if b0 < 0xC2 or b0 > 0xF4:
        return escaped
    if available == 1:
        return _truncated(escaped, available, end_of_input)

    b1 = data[pos + 1]
    if (b1 & 0xC0) != 0x80:
        return escaped
    if b0 < 0xE0:
        return DecodedUnit((b0 & 0x1F) << 6 | (b1 & 0x3F), 2)
    if available == 2:
        return _truncated(escaped, available, end_of_input)

    b2 = data[pos + 2]
    if (b2 & 0xC0) != 0x80:
        return escaped
    if b0 < 0xF0:
        value = (b0 & 0x0F) << 12 | (b1 & 0x3F) << 6 | (b2 & 0x3F)
        if value >= 0x800 and not SURROGATE_MIN <= value < SURROGATE_END:
            return DecodedUnit(value, 3)
        return escaped
    if available == 3:
        return _truncated(escaped, available, end_of_input)

    b3 = data[pos + 3]
    if (b3 & 0xC0) != 0x80:
        return escaped
    value = (b0 & 0x07) << 18 | (b1 & 0x3F) << 12 | (b2 & 0x3F) << 6 | (b3 & 0x3F)
    if 0x10000 <= value < SCALAR_END:
        return DecodedUnit(value, 4)
    return escaped


def utf8b_unit_length(data: bytes, pos: int, end: int) -> int:
    """Return how many bytes the sequence at ``data[pos]`` decodes from.

    Always evaluated as if at end of input, so a truncated tail counts as
    escaped bytes rather than an incomplete sequence.
    """
    return utf8b_to_scalar(data, pos, end, True).length
