"""Streaming conversion for utf8b.

This module provides chunked decoding of binary streams, incremental
encoder/decoder classes for the ``codecs`` machinery, and their configuration.
"""

from __future__ import annotations

from .config import StreamConfig
from .incremental import Codec, IncrementalDecoder, IncrementalEncoder, getregentry
from .stream import iter_decode, iter_encode

__all__ = [
    "StreamConfig",
    "iter_decode",
    "iter_encode",
    "Codec",
    "IncrementalEncoder",
    "IncrementalDecoder",
    "getregentry",
]
