"""Codec classes for the standard ``codecs`` machinery.

``getregentry()`` returns a ``codecs.CodecInfo`` named "utf-8b" that a
search function passed to ``codecs.register`` can hand out.
"""

from __future__ import annotations

import codecs

from ..codec.decoder import decode, decode_append
from ..codec.encoder import encode, encode_append, utf8b_length
from ..codec.outcomes import Encoded, InvalidArguments, InvalidScalar
from ..exceptions import DecodeError, EncodeError


def _decode_chunk(data: bytes, final: bool) -> tuple[str, int]:
    # Each byte yields at most one scalar
    output = [0] * len(data)
    result = decode_append(data, output, end_of_input=bool(final))
    if isinstance(result, InvalidArguments):
        raise DecodeError(f"Cannot decode chunk: {result.reason}")
    return "".join(map(chr, output[: result.scalars_produced])), result.bytes_consumed


def _encode_text(input: str, errors: str) -> bytes:
    """Encode ``input``, passing unencodable scalars to the ``errors`` handler.

    Raises:
        UnicodeEncodeError: If ``errors`` is "strict" and a scalar has no
            UTF-8b encoding, or a handler's replacement has none either
    """
    encoded = bytearray()
    position = 0
    while position < len(input):
        output = bytearray(utf8b_length(input, position))
        outcome = encode_append(input, output, start=position)
        if isinstance(outcome, Encoded):
            encoded += output[: outcome.position]
            break
        if not isinstance(outcome, InvalidScalar):
            raise EncodeError(f"Encoder stopped early: {outcome!r}")

        encoded += output[: utf8b_length(input, position, outcome.index)]
        error = UnicodeEncodeError(
            "utf-8b", input, outcome.index, outcome.index + 1, "surrogates not allowed"
        )
        if errors == "strict":
            raise error
        replacement, position = codecs.lookup_error(errors)(error)
        if isinstance(replacement, str):
            try:
                replacement = encode(replacement)
            except EncodeError:
                raise error from None
        encoded += replacement
        if position < 0:
            position += len(input)
        if not 0 <= position <= len(input):
            raise IndexError(f"position {position} from error handler out of bounds")
    return bytes(encoded)


class Codec(codecs.Codec):
    """UTF-8b stateless codec."""

    def encode(self, input: str, errors: str = "strict") -> tuple[bytes, int]:
        return _encode_text(input, errors), len(input)

    def decode(self, input: bytes, errors: str = "strict") -> tuple[str, int]:
        return decode(input), len(input)


class IncrementalEncoder(codecs.IncrementalEncoder):
    """UTF-8b incremental encoder."""

    def encode(self, input: str, final: bool = False) -> bytes:
        return _encode_text(input, self.errors)


class IncrementalDecoder(codecs.BufferedIncrementalDecoder):
    """UTF-8b incremental decoder.

    Bytes of a multi-byte sequence split across calls are buffered until the
    sequence completes, or escaped one by one on the ``final`` call.

    Example:
        >>> decoder = IncrementalDecoder()
        >>> decoder.decode(b"\\xe2\\x82")
        ''
        >>> decoder.decode(b"\\xac", final=True)
        '\\u20ac'
    """

    def _buffer_decode(self, input: bytes, errors: str, final: bool) -> tuple[str, int]:
        return _decode_chunk(input, final)


def getregentry() -> codecs.CodecInfo:
    """Return the codec registry entry."""
    return codecs.CodecInfo(
        name="utf-8b",
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
    )
