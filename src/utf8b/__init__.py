"""utf8b: Lossless UTF-8b Codec

A Python library for converting between bytes and Unicode scalar values with
UTF-8b, the byte-preserving variant of UTF-8 described in PEP 383. Bytes that
are not part of valid UTF-8 decode to escape values U+DC80-U+DCFF and encode
back to the same bytes, so every byte sequence round-trips exactly.

Key Features:
- Buffer-oriented conversion into caller-owned buffers, never past capacity
- Dry-run length computation for pre-sizing
- Incremental decoding of input split at arbitrary byte boundaries
- Explicit outcome types instead of exceptions in the core
- Pure Python implementation

Quick Start:
    >>> from utf8b import decode, encode
    >>>
    >>> text = decode(b"A\\xe2\\x82\\xac\\xff")
    >>> text
    'A\\u20ac\\udcff'
    >>> encode(text)
    b'A\\xe2\\x82\\xac\\xff'

Buffer API:
    >>> from utf8b import decode_append
    >>>
    >>> out = [0] * 8
    >>> result = decode_append(b"\\xe2\\x82", out, end_of_input=False)
    >>> result.bytes_consumed, result.incomplete
    (0, True)
"""

from __future__ import annotations

from .codec import (
    Decoded,
    DecodeRequest,
    Encoded,
    EncodeRequest,
    InsufficientCapacity,
    InvalidArguments,
    InvalidScalar,
    StopReason,
    decode,
    decode_append,
    decode_scalars,
    encode,
    encode_append,
    utf8b_length,
    utf8b_scalar_length,
)
from .exceptions import DecodeError, EncodeError, Utf8bError
from .streaming import IncrementalDecoder, IncrementalEncoder, StreamConfig, iter_decode, iter_encode
from .utils import (
    decoded_size,
    encoded_size,
    escape_byte,
    escape_count,
    escaped_byte,
    is_escape,
    is_wellformed,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "decode_scalars",
    # Buffer API
    "utf8b_length",
    "encode_append",
    "utf8b_scalar_length",
    "decode_append",
    "EncodeRequest",
    "DecodeRequest",
    # Outcomes
    "Encoded",
    "InvalidScalar",
    "InsufficientCapacity",
    "InvalidArguments",
    "Decoded",
    "StopReason",
    # Exceptions
    "Utf8bError",
    "EncodeError",
    "DecodeError",
    # Streaming
    "StreamConfig",
    "iter_decode",
    "iter_encode",
    "IncrementalEncoder",
    "IncrementalDecoder",
    # Escape values
    "is_escape",
    "escape_byte",
    "escaped_byte",
    # Sizing
    "encoded_size",
    "decoded_size",
    "escape_count",
    "is_wellformed",
    # Version
    "__version__",
]
