"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def mixed_bytes() -> bytes:
    """ASCII, a 3-byte sequence and an invalid byte."""
    return bytes([0x41, 0xE2, 0x82, 0xAC, 0xFF])


@pytest.fixture
def mixed_scalars() -> list[int]:
    """Scalars decoded from ``mixed_bytes``."""
    return [0x41, 0x20AC, 0xDCFF]


@pytest.fixture
def all_unit_forms() -> bytes:
    """One sequence of every length: 'A', U+00E9, U+20AC, U+1F600."""
    return "Aé€\U0001F600".encode("utf-8")
