#!/usr/bin/env python3
"""Streaming example for utf8b.

This example demonstrates:
1. Decoding input that arrives in arbitrary chunks
2. Retaining an incomplete multi-byte sequence between calls
3. Decoding a binary stream with iter_decode
4. Using the codecs-compatible incremental decoder
"""

from __future__ import annotations

import io
import logging

from utf8b import IncrementalDecoder, StreamConfig, decode_append, iter_decode


def main() -> None:
    """Run the streaming example."""
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("utf8b Streaming Example")
    print("=" * 60)
    print()

    data = "€uro \U0001F680 ".encode() + b"\xfe"
    chunks = [data[i : i + 2] for i in range(0, len(data), 2)]

    print("1. Manual chunk loop with decode_append...")
    pending = b""
    scalars: list[int] = []
    for i, chunk in enumerate(chunks):
        final = i == len(chunks) - 1
        buffer = pending + chunk
        output = [0] * len(buffer)
        result = decode_append(buffer, output, end_of_input=final)
        scalars.extend(output[: result.scalars_produced])
        pending = buffer[result.bytes_consumed :]
        print(f"   chunk {chunk!r}: consumed {result.bytes_consumed}, pending {pending!r}")
    print(f"   Result: {''.join(map(chr, scalars))!r}")
    print()

    print("2. iter_decode over a binary stream...")
    pieces = list(iter_decode(io.BytesIO(data), StreamConfig(chunk_size=3)))
    print(f"   Pieces: {pieces!r}")
    print()

    print("3. IncrementalDecoder...")
    decoder = IncrementalDecoder()
    out = [decoder.decode(chunk) for chunk in chunks]
    out.append(decoder.decode(b"", final=True))
    print(f"   Result: {''.join(out)!r}")
    print()


if __name__ == "__main__":
    main()
