"""UTF-8b codec.

This module provides the buffer-oriented conversion functions between byte
sequences and scalar sequences, and allocating ``encode``/``decode``
conveniences on top of them.
"""

from __future__ import annotations

from .decoder import decode, decode_append, decode_scalars, utf8b_scalar_length
from .encoder import encode, encode_append, utf8b_length
from .outcomes import (
    Decoded,
    DecodeOutcome,
    Encoded,
    EncodeOutcome,
    InsufficientCapacity,
    InvalidArguments,
    InvalidScalar,
    StopReason,
)
from .request import DecodeRequest, EncodeRequest

__all__ = [
    # Sequence encoder
    "utf8b_length",
    "encode_append",
    "encode",
    # Sequence decoder
    "utf8b_scalar_length",
    "decode_append",
    "decode_scalars",
    "decode",
    # Requests
    "EncodeRequest",
    "DecodeRequest",
    # Outcomes
    "Encoded",
    "InvalidScalar",
    "InsufficientCapacity",
    "InvalidArguments",
    "Decoded",
    "StopReason",
    "EncodeOutcome",
    "DecodeOutcome",
]
