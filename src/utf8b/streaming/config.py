"""Configuration for streaming conversion.

This module provides the configuration dataclass used when decoding a byte
stream chunk by chunk.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StreamConfig:
    """Configuration for chunked stream decoding.

    Attributes:
        chunk_size: Bytes requested from the stream per read (default 65536).
            Any size works, down to 1 byte: a multi-byte sequence split across
            reads is carried over to the next chunk.

        output_capacity: Scalar slots filled per ``decode_append`` call
            (default 4096). When a chunk decodes to more scalars than this,
            it is converted in several passes.

    Examples:
        ```python
        from utf8b.streaming import StreamConfig, iter_decode

        config = StreamConfig(chunk_size=4096, output_capacity=1024)
        with open("names.bin", "rb") as f:
            text = "".join(iter_decode(f, config))
        ```
    """

    chunk_size: int = 65536  # bytes
    output_capacity: int = 4096  # scalars

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be > 0, got {self.chunk_size}")

        if self.output_capacity <= 0:
            raise ValueError(f"output_capacity must be > 0, got {self.output_capacity}")
