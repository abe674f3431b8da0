"""Size calculation utilities.

This module provides functions to calculate converted sizes of whole
buffers without allocating the converted output.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

from ..codec.decoder import decode_scalars, utf8b_scalar_length
from ..codec.encoder import utf8b_length
from ..codec.outcomes import InvalidArguments
from .escape import is_escape


def encoded_size(scalars: Union[str, Sequence[int]]) -> int:
    """Calculate the UTF-8b encoded size of a string in bytes.

    Like ``utf8b_length``, this does not reject unencodable scalars.

    Args:
        scalars: String or sequence of scalar values

    Returns:
        Size in bytes

    Example:
        >>> encoded_size("h\\u20ac\\udcff")
        5
    """
    size = utf8b_length(scalars)
    if isinstance(size, InvalidArguments):
        raise ValueError(size.reason)
    return size


def decoded_size(data: bytes) -> int:
    """Calculate how many scalar values a byte sequence decodes to.

    Args:
        data: Bytes-like object

    Returns:
        Number of scalar values (escape values included)

    Example:
        >>> decoded_size(b"A\\xe2\\x82\\xac\\xff")
        3
    """
    size = utf8b_scalar_length(data)
    if isinstance(size, InvalidArguments):
        raise ValueError(size.reason)
    return size


def escape_count(scalars: Union[str, Iterable[int]]) -> int:
    """Count the escape values in a string or scalar sequence."""
    return sum(
        1 for value in scalars if is_escape(ord(value) if isinstance(value, str) else value)
    )


def is_wellformed(data: bytes) -> bool:
    """Check whether a byte sequence is well-formed UTF-8.

    Valid UTF-8 never decodes to an escape value, so the data is well-formed
    exactly when decoding produces none.
    """
    return escape_count(decode_scalars(data)) == 0
