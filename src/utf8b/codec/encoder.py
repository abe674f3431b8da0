"""UTF-8b encoder for scalar sequences.

This module converts ranges of scalar values (a ``str`` or any sequence of
ints) into UTF-8b bytes written to a caller-owned buffer, plus a dry-run
length computation and an allocating ``encode()`` convenience.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from ..exceptions import EncodeError
from .outcomes import (
    Encoded,
    EncodeOutcome,
    InsufficientCapacity,
    InvalidArguments,
    InvalidScalar,
)
from .request import EncodeRequest, describe_error
from .units import is_encodable, scalar_to_utf8b, scalar_utf8b_length

logger = logging.getLogger(__name__)

Scalars = Union[str, Sequence[int]]


def _scalar_at(scalars: Scalars, index: int) -> int:
    value = scalars[index]
    return ord(value) if isinstance(value, str) else value


def utf8b_length(
    scalars: Scalars, start: int = 0, end: Optional[int] = None
) -> int | InvalidArguments:
    """Compute the UTF-8b encoded length of ``scalars[start:end]``.

    Does not validate: bare surrogates outside the escape range are counted
    as 3 bytes and values >= 0x110000 as 4, although ``encode_append`` rejects
    both. A returned length is not proof that the range is encodable.

    Args:
        scalars: String or sequence of scalar values
        start: First index (inclusive)
        end: Last index (exclusive), None for ``len(scalars)``

    Returns:
        Number of bytes, or InvalidArguments for a bad range
    """
    try:
        first, last, _ = EncodeRequest(start=start, end=end).resolve(len(scalars), 0)
    except ValueError as e:
        return InvalidArguments(reason=describe_error(e))

    total = 0
    for index in range(first, last):
        total += scalar_utf8b_length(_scalar_at(scalars, index))
    return total


def encode_append(
    scalars: Scalars,
    output: bytearray,
    *,
    start: int = 0,
    end: Optional[int] = None,
    output_start: int = 0,
) -> EncodeOutcome:
    """Encode ``scalars[start:end]`` into ``output`` starting at ``output_start``.

    Writing never goes past ``len(output)``. On failure, every unit written
    before the stopping point stays in ``output``; nothing is rolled back.

    Args:
        scalars: String or sequence of scalar values
        output: Writable byte buffer; its length is the capacity
        start: First scalar index (inclusive)
        end: Last scalar index (exclusive), None for ``len(scalars)``
        output_start: Byte position of the first write

    Returns:
        Encoded with the final write position on success;
        InvalidScalar if a scalar has no UTF-8b encoding;
        InsufficientCapacity if the next unit does not fit;
        InvalidArguments if a range is malformed (nothing written)

    Example:
        >>> buf = bytearray(8)
        >>> encode_append("h\\u20ac", buf)
        Encoded(position=4)
    """
    try:
        request = EncodeRequest(start=start, end=end, output_start=output_start)
        first, last, position = request.resolve(len(scalars), len(output))
    except ValueError as e:
        return InvalidArguments(reason=describe_error(e))

    capacity = len(output)
    for index in range(first, last):
        value = _scalar_at(scalars, index)
        if not is_encodable(value):
            return InvalidScalar(value=value, index=index)
        written = scalar_to_utf8b(value, output, position, capacity)
        if written == 0:
            return InsufficientCapacity(position=position, index=index)
        position += written
    return Encoded(position=position)


def encode(scalars: Scalars) -> bytes:
    """Encode a whole string or scalar sequence to UTF-8b bytes.

    Escape values (U+DC80-U+DCFF) become the raw bytes they stand for, so
    ``encode(decode(data)) == data`` for any ``data``.

    Args:
        scalars: String or sequence of scalar values

    Returns:
        Encoded bytes

    Raises:
        EncodeError: If a scalar has no UTF-8b encoding

    Example:
        >>> encode("caf\\u00e9\\udcff")
        b'caf\\xc3\\xa9\\xff'
    """
    length = utf8b_length(scalars)
    if isinstance(length, InvalidArguments):
        raise EncodeError(f"Cannot size input: {length.reason}")

    output = bytearray(length)
    outcome = encode_append(scalars, output)

    if isinstance(outcome, InvalidScalar):
        logger.debug("Unencodable scalar 0x%X at index %d", outcome.value, outcome.index)
        raise EncodeError(
            f"Scalar 0x{outcome.value:X} at index {outcome.index} has no UTF-8b encoding",
            value=outcome.value,
            index=outcome.index,
        )
    if not isinstance(outcome, Encoded) or outcome.position != length:
        raise EncodeError(f"Encoder stopped early: {outcome!r}")

    return bytes(output)
