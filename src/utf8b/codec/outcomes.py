"""Outcome types returned by the sequence encoder and decoder.

Every outcome is its own frozen model, so success and each failure kind are
told apart by type rather than by the range of a returned number.
"""

from __future__ import annotations

import enum
from typing import Union

from pydantic import BaseModel, ConfigDict


class _Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)


class Encoded(_Outcome):
    """All scalars in the range were encoded.

    Attributes:
        position: Output position just past the last byte written
    """

    position: int


class InvalidScalar(_Outcome):
    """Encoding stopped at a scalar that has no UTF-8b encoding.

    Attributes:
        value: The offending scalar value
        index: Its index in the scalar sequence
    """

    value: int
    index: int


class InsufficientCapacity(_Outcome):
    """Encoding stopped because the next unit does not fit in the output.

    Attributes:
        position: Output position just past the last byte written
        index: Index of the scalar that did not fit
    """

    position: int
    index: int


class InvalidArguments(_Outcome):
    """A range or buffer argument was rejected; nothing was written."""

    reason: str


class StopReason(enum.Enum):
    """Why ``decode_append`` stopped."""

    INPUT_EXHAUSTED = "input_exhausted"
    OUTPUT_FULL = "output_full"
    INCOMPLETE = "incomplete"


class Decoded(_Outcome):
    """Progress made by one ``decode_append`` call.

    Attributes:
        bytes_consumed: Bytes converted, counted from the start of the input range
        scalars_produced: Scalars written, counted from the output start
        stop: Which stopping condition ended the call
    """

    bytes_consumed: int
    scalars_produced: int
    stop: StopReason = StopReason.INPUT_EXHAUSTED

    @property
    def incomplete(self) -> bool:
        return self.stop is StopReason.INCOMPLETE


EncodeOutcome = Union[Encoded, InvalidScalar, InsufficientCapacity, InvalidArguments]
DecodeOutcome = Union[Decoded, InvalidArguments]
