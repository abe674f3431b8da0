"""Chunked conversion of binary streams and string pieces.

``iter_decode`` applies the incremental decoding contract to a binary file
object: the unconsumed tail of each chunk is prepended to the next, and
end of input is asserted only once the stream is exhausted.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterable, Iterator, Optional

from ..codec.decoder import decode_append
from ..codec.encoder import encode
from ..codec.outcomes import InvalidArguments, StopReason
from ..exceptions import DecodeError
from .config import StreamConfig

logger = logging.getLogger(__name__)


def iter_decode(stream: BinaryIO, config: Optional[StreamConfig] = None) -> Iterator[str]:
    """Decode a binary stream to string pieces.

    Concatenating the pieces gives the same string as decoding the whole
    stream content at once, regardless of chunk size.

    Args:
        stream: Binary file object with a ``read(size)`` method
        config: Chunk and output sizes, defaults to ``StreamConfig()``

    Yields:
        Decoded string pieces (never empty)

    Raises:
        DecodeError: If bytes remain pending after the end of the stream

    Example:
        >>> import io
        >>> "".join(iter_decode(io.BytesIO(b"\\xe2\\x82\\xac\\xff"), StreamConfig(chunk_size=1)))
        '\\u20ac\\udcff'
    """
    config = config or StreamConfig()
    output = [0] * config.output_capacity
    pending = b""
    total_bytes = 0

    while True:
        chunk = stream.read(config.chunk_size)
        final = not chunk
        data = pending + chunk
        total_bytes += len(chunk)
        position = 0

        while True:
            result = decode_append(data, output, start=position, end_of_input=final)
            if isinstance(result, InvalidArguments):
                raise DecodeError(f"Cannot decode chunk: {result.reason}")
            if result.scalars_produced:
                yield "".join(map(chr, output[: result.scalars_produced]))
            position += result.bytes_consumed
            if result.stop is not StopReason.OUTPUT_FULL:
                break

        pending = data[position:]
        if pending:
            logger.debug("Carrying %d pending byte(s) to the next chunk", len(pending))
        if final:
            break

    if pending:
        raise DecodeError(f"{len(pending)} bytes still pending at end of stream")
    logger.debug("Decoded %d bytes from stream", total_bytes)


def iter_encode(pieces: Iterable[str]) -> Iterator[bytes]:
    """Encode string pieces one by one.

    UTF-8b encoding carries no state between scalars, so each piece encodes
    independently.

    Raises:
        EncodeError: If a piece contains an unencodable scalar
    """
    for piece in pieces:
        if piece:
            yield encode(piece)
