"""UTF-8b decoder for byte sequences.

This module converts ranges of bytes into scalar values written to a
caller-owned mutable sequence. ``decode_append`` is incremental: a
multi-byte sequence cut short at the end of the range is left unconsumed
until more input arrives or the caller asserts end of input.
"""

from __future__ import annotations

import logging
from typing import MutableSequence, Optional

from ..exceptions import DecodeError
from .outcomes import Decoded, DecodeOutcome, InvalidArguments, StopReason
from .request import DecodeRequest, describe_error
from .units import utf8b_to_scalar, utf8b_unit_length

logger = logging.getLogger(__name__)


def utf8b_scalar_length(
    data: bytes, start: int = 0, end: Optional[int] = None
) -> int | InvalidArguments:
    """Count the scalar values ``data[start:end]`` decodes to.

    Evaluated as if at end of input: a truncated trailing sequence counts
    as one escape value per byte.

    Args:
        data: Bytes-like object
        start: First byte position (inclusive)
        end: Last byte position (exclusive), None for ``len(data)``

    Returns:
        Number of scalar values, or InvalidArguments for a bad range
    """
    try:
        first, last, _, _ = DecodeRequest(start=start, end=end).resolve(len(data), 0)
    except ValueError as e:
        return InvalidArguments(reason=describe_error(e))

    count = 0
    position = first
    while position < last:
        position += utf8b_unit_length(data, position, last)
        count += 1
    return count


def decode_append(
    data: bytes,
    output: MutableSequence[int],
    *,
    start: int = 0,
    end: Optional[int] = None,
    output_start: int = 0,
    output_end: Optional[int] = None,
    end_of_input: bool = True,
) -> DecodeOutcome:
    """Decode ``data[start:end]`` into ``output[output_start:output_end]``.

    Decoding stops when the input range is exhausted, when the output range
    is full, or (only if ``end_of_input`` is false) when the remaining bytes
    are an incomplete multi-byte sequence. None of these is an error.

    Callers streaming input must keep the unconsumed suffix
    ``data[start + bytes_consumed:end]`` and prepend it to the next chunk.
    Only the last chunk should be decoded with ``end_of_input=True``.

    Args:
        data: Bytes-like object
        output: Mutable sequence of ints (list, array.array) receiving scalars
        start: First byte position (inclusive)
        end: Last byte position (exclusive), None for ``len(data)``
        output_start: First output slot to write
        output_end: Output slot limit (exclusive), None for ``len(output)``
        end_of_input: True if no more bytes will follow ``data[end - 1]``

    Returns:
        Decoded with bytes consumed, scalars produced and the stop reason,
        or InvalidArguments if a range is malformed (nothing written)

    Example:
        >>> out = [0] * 4
        >>> decode_append(b"A\\xe2\\x82", out, end_of_input=False)
        Decoded(bytes_consumed=1, scalars_produced=1, stop=<StopReason.INCOMPLETE: 'incomplete'>)
    """
    try:
        request = DecodeRequest(
            start=start,
            end=end,
            output_start=output_start,
            output_end=output_end,
            end_of_input=end_of_input,
        )
        first, last, out_first, out_last = request.resolve(len(data), len(output))
    except ValueError as e:
        return InvalidArguments(reason=describe_error(e))

    position = first
    out_position = out_first
    stop = StopReason.INPUT_EXHAUSTED
    while position < last:
        if out_position >= out_last:
            stop = StopReason.OUTPUT_FULL
            break
        unit = utf8b_to_scalar(data, position, last, request.end_of_input)
        if unit.incomplete:
            stop = StopReason.INCOMPLETE
            break
        output[out_position] = unit.scalar
        position += unit.length
        out_position += 1

    return Decoded(
        bytes_consumed=position - first,
        scalars_produced=out_position - out_first,
        stop=stop,
    )


def decode_scalars(data: bytes) -> list[int]:
    """Decode a whole byte sequence to a list of scalar values.

    Args:
        data: Bytes-like object

    Returns:
        Scalar values, with escape values for bytes outside valid UTF-8

    Raises:
        DecodeError: If the decoding pass disagrees with the sizing pass
    """
    count = utf8b_scalar_length(data)
    if isinstance(count, InvalidArguments):
        raise DecodeError(f"Cannot size input: {count.reason}")

    output = [0] * count
    result = decode_append(data, output, end_of_input=True)
    if isinstance(result, InvalidArguments):
        raise DecodeError(f"Cannot decode input: {result.reason}")

    if result.bytes_consumed != len(data) or result.scalars_produced != count:
        logger.debug(
            "Decode mismatch: consumed %d of %d bytes, produced %d of %d scalars",
            result.bytes_consumed,
            len(data),
            result.scalars_produced,
            count,
        )
        raise DecodeError(
            f"Decoded {result.scalars_produced} scalars from {result.bytes_consumed} bytes, "
            f"expected {count} scalars from {len(data)} bytes"
        )
    return output


def decode(data: bytes) -> str:
    """Decode a whole byte sequence to a string.

    Bytes that are not part of valid UTF-8 become lone surrogates
    U+DC80-U+DCFF, matching ``data.decode("utf-8", "surrogateescape")``.

    Args:
        data: Bytes-like object

    Returns:
        Decoded string

    Raises:
        DecodeError: If the decoding pass disagrees with the sizing pass

    Example:
        >>> decode(b"A\\xe2\\x82\\xac\\xff")
        'A\\u20ac\\udcff'
    """
    return "".join(map(chr, decode_scalars(data)))
