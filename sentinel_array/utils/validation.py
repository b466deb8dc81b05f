"""Validation helpers for sentinel sequences."""

from __future__ import annotations

from operator import index as op_index
from typing import TypeVar

T = TypeVar("T")


class AbsentValueError(ValueError):
    """Raised when the absence sentinel would be stored as an element."""


def ensure_present(value: T | None, *, where: str) -> T:
    """Return ``value`` unchanged, rejecting the absence sentinel."""
    if value is None:
        msg = f"Cannot store the absence sentinel (None) as an element ({where})"
        raise AbsentValueError(msg)
    return value


def ensure_size(n: object) -> int:
    """Normalize a requested sequence size to a non-negative ``int``."""
    try:
        size = op_index(n)  # type: ignore[arg-type]
    except TypeError:
        msg = f"size must be an integer, got {type(n).__name__}"
        raise TypeError(msg) from None
    if size < 0:
        msg = f"size must be non-negative, got {size}"
        raise ValueError(msg)
    return size
