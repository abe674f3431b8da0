"""Request models describing the ranges a conversion works on.

All ranges are half-open ``[start, end)``; an ``end`` of None means the
length of the corresponding buffer.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


def _check_range(start: int, end: Optional[int], what: str) -> None:
    if end is not None and end < start:
        raise ValueError(f"{what} range is inverted: start={start}, end={end}")


def _resolve_range(start: int, end: Optional[int], length: int, what: str) -> tuple[int, int]:
    if end is None:
        end = length
    if start > length or end > length:
        raise ValueError(
            f"{what} range [{start}, {end}) exceeds buffer length {length}"
        )
    return start, end


class EncodeRequest(BaseModel):
    """Ranges for one ``encode_append`` call.

    Attributes:
        start: First scalar index to encode
        end: Scalar index to stop at (exclusive), None for the whole sequence
        output_start: Byte position where writing starts
    """

    model_config = ConfigDict(frozen=True, strict=True)

    start: int = Field(default=0, ge=0)
    end: Optional[int] = Field(default=None, ge=0)
    output_start: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_ordered(self) -> EncodeRequest:
        _check_range(self.start, self.end, "input")
        return self

    def resolve(self, input_length: int, output_length: int) -> tuple[int, int, int]:
        """Return ``(start, end, output_start)`` checked against buffer lengths.

        Raises:
            ValueError: If a range falls outside its buffer
        """
        start, end = _resolve_range(self.start, self.end, input_length, "input")
        if self.output_start > output_length:
            raise ValueError(
                f"output start {self.output_start} exceeds buffer length {output_length}"
            )
        return start, end, self.output_start


class DecodeRequest(BaseModel):
    """Ranges and end-of-input flag for one ``decode_append`` call.

    Attributes:
        start: First byte position to decode
        end: Byte position to stop at (exclusive), None for the whole buffer
        output_start: First scalar slot to write
        output_end: Scalar slot limit (exclusive), None for the whole buffer
        end_of_input: True if no more bytes will follow the input range
    """

    model_config = ConfigDict(frozen=True, strict=True)

    start: int = Field(default=0, ge=0)
    end: Optional[int] = Field(default=None, ge=0)
    output_start: int = Field(default=0, ge=0)
    output_end: Optional[int] = Field(default=None, ge=0)
    end_of_input: bool = True

    @model_validator(mode="after")
    def check_ordered(self) -> DecodeRequest:
        _check_range(self.start, self.end, "input")
        _check_range(self.output_start, self.output_end, "output")
        return self

    def resolve(self, input_length: int, output_length: int) -> tuple[int, int, int, int]:
        """Return ``(start, end, output_start, output_end)`` checked against buffer lengths.

        Raises:
            ValueError: If a range falls outside its buffer
        """
        start, end = _resolve_range(self.start, self.end, input_length, "input")
        output_start, output_end = _resolve_range(
            self.output_start, self.output_end, output_length, "output"
        )
        return start, end, output_start, output_end


def describe_error(error: ValidationError | ValueError) -> str:
    """Condense a validation failure into a one-line reason."""
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in item['loc']) or 'request'}: {item['msg']}"
            for item in error.errors()
        )
    return str(error)
