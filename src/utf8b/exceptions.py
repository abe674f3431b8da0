"""Exception hierarchy for utf8b.

The conversion functions in ``utf8b.codec`` report problems as outcome
values. The exceptions here are raised by the convenience layers built on
top of them (``encode``, ``decode``, streaming helpers).
All exceptions inherit from Utf8bError for easy catching of any utf8b-specific error.
"""

from __future__ import annotations

from typing import Optional


class Utf8bError(Exception):
    """Base exception for all utf8b errors."""

    pass


class EncodeError(Utf8bError):
    """Raised when a string or scalar sequence cannot be encoded.

    Examples:
        - Bare surrogate outside U+DC80-U+DCFF
        - Scalar value >= 0x110000 or negative

    Attributes:
        value: The offending scalar value, if known
        index: Its index in the input, if known
    """

    def __init__(
        self, message: str, *, value: Optional[int] = None, index: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.value = value
        self.index = index


class DecodeError(Utf8bError):
    """Raised when decoding cannot complete.

    UTF-8b never rejects byte content, so this signals misuse instead:

    Examples:
        - Conversion result disagrees with the sizing pass
        - Stream ended with bytes still pending
    """

    pass
