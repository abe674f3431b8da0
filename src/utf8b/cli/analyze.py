"""File analysis CLI command."""

from __future__ import annotations

import logging
from pathlib import Path

from ..codec.encoder import encode
from ..streaming.config import StreamConfig
from ..streaming.stream import iter_decode
from ..utils.sizing import escape_count

logger = logging.getLogger(__name__)


def analyze_file(file_path: Path, config: StreamConfig) -> bool:
    """Decode a file in streaming mode and print a UTF-8b report.

    Each decoded piece is re-encoded and compared against the matching
    bytes of a second handle on the file, so neither the file nor its
    re-encoding is held in memory.

    Args:
        file_path: Path to the file to inspect
        config: Chunk and output sizes for streaming

    Returns:
        True if re-encoding the decoded scalars reproduces the file exactly
    """
    logger.debug("Analyzing %s with chunk size %d", file_path, config.chunk_size)

    size = 0
    scalars = 0
    escapes = 0
    lossless = True
    with file_path.open("rb") as stream, file_path.open("rb") as original:
        for piece in iter_decode(stream, config):
            scalars += len(piece)
            escapes += escape_count(piece)
            encoded = encode(piece)
            size += len(encoded)
            if lossless and original.read(len(encoded)) != encoded:
                logger.debug("Mismatch in the %d bytes ending at offset %d", len(encoded), size)
                lossless = False
        if lossless and original.read(1):
            lossless = False

    print(f"{'=' * 19} {file_path.name} {'=' * 19}")
    print(f"Bytes{'.' * 33}{file_path.stat().st_size}")
    print(f"Scalars{'.' * 31}{scalars}")
    print(f"Escaped bytes{'.' * 25}{escapes}")
    print(f"Well-formed UTF-8{'.' * 21}{'yes' if escapes == 0 else 'no'}")
    print(f"Lossless round-trip{'.' * 19}{'yes' if lossless else 'NO'}")

    if not lossless:
        logger.warning("Round-trip mismatch for %s", file_path)
    return lossless
