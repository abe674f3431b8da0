#!/usr/bin/env python3
"""Basic usage example for utf8b.

This example demonstrates:
1. Decoding bytes that are not valid UTF-8
2. Encoding back to the exact original bytes
3. Converting through caller-owned buffers
4. Handling outcome values
"""

from __future__ import annotations

from utf8b import (
    Encoded,
    InsufficientCapacity,
    InvalidScalar,
    decode,
    decode_append,
    encode,
    encode_append,
    escape_count,
    utf8b_length,
    utf8b_scalar_length,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("utf8b Basic Usage Example")
    print("=" * 60)
    print()

    # Bytes mixing UTF-8 text with a Latin-1 byte and a stray 0xFF
    raw = "Zürich ".encode() + "café".encode("latin-1") + b"\xff"

    print("1. Decoding mixed bytes...")
    text = decode(raw)
    print(f"   Input:   {raw!r}")
    print(f"   Decoded: {text!r}")
    print(f"   Escaped bytes: {escape_count(text)}")
    print()

    print("2. Encoding back...")
    again = encode(text)
    print(f"   Encoded: {again!r}")
    print(f"   Lossless: {again == raw}")
    print()

    print("3. Converting through caller-owned buffers...")
    scalars = [0] * utf8b_scalar_length(raw)
    result = decode_append(raw, scalars)
    print(f"   Consumed {result.bytes_consumed} bytes, produced {result.scalars_produced} scalars")

    output = bytearray(utf8b_length(scalars))
    outcome = encode_append(scalars, output)
    if isinstance(outcome, Encoded):
        print(f"   Wrote {outcome.position} bytes")
    print()

    print("4. Handling outcomes...")
    small = bytearray(4)
    outcome = encode_append(text, small)
    if isinstance(outcome, InsufficientCapacity):
        print(f"   Buffer full after {outcome.position} bytes, at scalar {outcome.index}")

    outcome = encode_append("ok\ud800", bytearray(8))
    if isinstance(outcome, InvalidScalar):
        print(f"   Scalar 0x{outcome.value:X} at index {outcome.index} cannot be encoded")
    print()


if __name__ == "__main__":
    main()
