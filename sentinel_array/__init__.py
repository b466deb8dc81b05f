"""sentinel-array public interface.

Dense, sentinel-terminated sequences over an index → value mapping, with
list-style mutation and functional combinators. Operations live in
``sentinel_array.ops``; the container and its helper types in
``sentinel_array.core``.
"""

from __future__ import annotations

from .core import (
    ABSENT,
    Constant,
    FailureReason,
    Generator,
    MutationResult,
    SentinelArray,
)
from .ops import (  # noqa: A004
    append,
    create_array,
    find,
    find_all,
    for_each,
    get_length,
    insert,
    map,
    reduce,
    remove,
)
from .utils import DEFAULT_CONFIG, AbsentValueError, SequenceConfig

__all__ = [
    "ABSENT",
    "DEFAULT_CONFIG",
    "AbsentValueError",
    "Constant",
    "FailureReason",
    "Generator",
    "MutationResult",
    "SentinelArray",
    "SequenceConfig",
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

__version__ = "0.1.0"
