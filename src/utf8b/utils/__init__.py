"""Utility functions for utf8b.

This module provides escape-value helpers and size calculation.
"""

from __future__ import annotations

from .escape import escape_byte, escaped_byte, is_escape
from .sizing import decoded_size, encoded_size, escape_count, is_wellformed

__all__ = [
    # Escape values
    "is_escape",
    "escape_byte",
    "escaped_byte",
    # Sizing functions
    "encoded_size",
    "decoded_size",
    "escape_count",
    "is_wellformed",
]
