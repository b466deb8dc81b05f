"""Shared test fixtures for sentinel-array tests."""

import pytest

from sentinel_array import SentinelArray


@pytest.fixture
def abc_sequence():
    """Three-element sequence ``["a", "b", "c"]`` at indices 1..3."""
    return SentinelArray(["a", "b", "c"])


@pytest.fixture
def numbers():
    """Sequence ``[1, 2, 3, 4, 5]``."""
    return SentinelArray([1, 2, 3, 4, 5])
