"""Unit tests for the scalar sequence encoder."""

from __future__ import annotations

from array import array

import pytest

from utf8b import EncodeError
from utf8b.codec.encoder import encode, encode_append, utf8b_length
from utf8b.codec.outcomes import Encoded, InsufficientCapacity, InvalidArguments, InvalidScalar


class TestLength:
    """Test dry-run length computation."""

    def test_mixed(self, mixed_scalars: list[int]) -> None:
        """Test the length of ASCII, 3-byte and escape scalars."""
        assert utf8b_length(mixed_scalars) == 5

    def test_string_input(self) -> None:
        """Test that strings are measured by code point."""
        assert utf8b_length("Aé€\U0001F600") == 1 + 2 + 3 + 4

    def test_subrange(self) -> None:
        """Test a half-open subrange."""
        assert utf8b_length([0x41, 0x20AC, 0x1F600], 1, 2) == 3
        assert utf8b_length([0x41, 0x20AC], 2, 2) == 0

    @pytest.mark.parametrize(("start", "end"), [(-1, None), (2, 1), (0, 4)])
    def test_invalid_range(self, start: int, end: int | None) -> None:
        """Test negative, inverted and out-of-bounds ranges."""
        result = utf8b_length([1, 2, 3], start, end)
        assert isinstance(result, InvalidArguments)
        assert result.reason

    def test_length_counts_bare_surrogate(self) -> None:
        """Test that sizing does not reject what encoding rejects.

        The length pass reports 3 bytes for a bare surrogate while
        encode_append returns InvalidScalar for the same input.
        """
        assert utf8b_length([0xD800]) == 3
        outcome = encode_append([0xD800], bytearray(3))
        assert outcome == InvalidScalar(value=0xD800, index=0)


class TestEncodeAppend:
    """Test bounded appending into a byte buffer."""

    def test_success(self, mixed_scalars: list[int], mixed_bytes: bytes) -> None:
        """Test encoding a whole sequence."""
        out = bytearray(5)
        assert encode_append(mixed_scalars, out) == Encoded(position=5)
        assert bytes(out) == mixed_bytes

    def test_output_start(self) -> None:
        """Test that writing starts at output_start."""
        out = bytearray(b"xx\x00\x00\x00\x00")
        assert encode_append("é€", out, output_start=1) == Encoded(position=6)
        assert bytes(out) == b"x\xc3\xa9\xe2\x82\xac"

    def test_array_input(self) -> None:
        """Test an array of scalars."""
        out = bytearray(4)
        assert encode_append(array("I", [0x1F600]), out) == Encoded(position=4)
        assert bytes(out) == b"\xf0\x9f\x98\x80"

    def test_empty_range(self) -> None:
        """Test that an empty range succeeds at output_start."""
        assert encode_append("abc", bytearray(2), start=1, end=1, output_start=2) == Encoded(
            position=2
        )

    def test_invalid_scalar_keeps_prefix(self) -> None:
        """Test stopping at an unencodable scalar."""
        out = bytearray(8)
        outcome = encode_append([0x41, 0x42, 0xDFFF, 0x43], out)
        assert outcome == InvalidScalar(value=0xDFFF, index=2)
        assert bytes(out[:2]) == b"AB"
        assert bytes(out[2:]) == bytes(6)

    def test_too_large_scalar(self) -> None:
        """Test a scalar above 0x10FFFF."""
        assert encode_append([0x110000], bytearray(4)) == InvalidScalar(value=0x110000, index=0)

    def test_insufficient_capacity(self) -> None:
        """Test that a unit that does not fit is not written."""
        out = bytearray(b"\xaa" * 4)
        outcome = encode_append("A€", out, output_start=2)
        assert outcome == InsufficientCapacity(position=3, index=1)
        assert bytes(out) == b"\xaa\xaaA\xaa"

    def test_capacity_reported_after_prefix(self) -> None:
        """Test the committed position on capacity failure."""
        out = bytearray(5)
        outcome = encode_append([0x20AC, 0x20AC], out)
        assert isinstance(outcome, InsufficientCapacity)
        assert outcome.position == 3
        assert bytes(out[:3]) == b"\xe2\x82\xac"
        assert bytes(out[3:]) == b"\x00\x00"

    def test_invalid_scalar_wins_over_capacity(self) -> None:
        """Test that validity is checked before room."""
        assert encode_append([0xD800], bytearray(0)) == InvalidScalar(value=0xD800, index=0)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"start": -1},
            {"start": 2, "end": 1},
            {"end": 10},
            {"output_start": -1},
            {"output_start": 9},
        ],
    )
    def test_invalid_arguments_write_nothing(self, kwargs: dict[str, int]) -> None:
        """Test that malformed ranges are rejected before writing."""
        out = bytearray(4)
        outcome = encode_append("abc", out, **kwargs)
        assert isinstance(outcome, InvalidArguments)
        assert out == bytearray(4)

    @pytest.mark.parametrize("kwargs", [{"start": "1"}, {"start": True}, {"output_start": 1.0}])
    def test_non_int_arguments_rejected(self, kwargs: dict[str, object]) -> None:
        """Test that strings, bools and floats are not coerced into range values."""
        out = bytearray(4)
        outcome = encode_append("abc", out, **kwargs)
        assert isinstance(outcome, InvalidArguments)
        assert out == bytearray(4)

    def test_length_rejects_non_int_start(self) -> None:
        """Test that the length pass applies the same strict range check."""
        assert isinstance(utf8b_length("abc", "1"), InvalidArguments)


class TestEncode:
    """Test the allocating encode()."""

    def test_encode_string(self) -> None:
        """Test encoding text with an escape value."""
        assert encode("A€\udcff") == b"A\xe2\x82\xac\xff"

    def test_encode_matches_surrogateescape(self) -> None:
        """Test agreement with Python's surrogateescape handler."""
        text = "naïve \udce9t\udcff \U0001F600"
        assert encode(text) == text.encode("utf-8", "surrogateescape")

    def test_encode_error(self) -> None:
        """Test that unencodable scalars raise EncodeError."""
        with pytest.raises(EncodeError, match="0xD800") as excinfo:
            encode("ab\ud800")
        assert excinfo.value.value == 0xD800
        assert excinfo.value.index == 2

    def test_encode_empty(self) -> None:
        """Test encoding nothing."""
        assert encode("") == b""
