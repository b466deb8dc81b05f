"""Core primitives.

Low-level types shared by the operations in ``sentinel_array.ops``: the
container itself, construction fills, and mutation outcomes.
"""

from .fill import Constant, Fill, Generator, identity_fill
from .results import FailureReason, MutationResult
from .sequence import ABSENT, SentinelArray, scan_length

__all__ = [
    "ABSENT",
    "Constant",
    "FailureReason",
    "Fill",
    "Generator",
    "MutationResult",
    "SentinelArray",
    "identity_fill",
    "scan_length",
]
