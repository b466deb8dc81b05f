"""Sequence operations: construction, mutation, and combinators."""

from .combinators import find, find_all, for_each, map, reduce  # noqa: A004
from .construction import create_array, get_length
from .mutation import append, insert, remove

__all__ = [
    "append",
    "create_array",
    "find",
    "find_all",
    "for_each",
    "get_length",
    "insert",
    "map",
    "reduce",
    "remove",
]
