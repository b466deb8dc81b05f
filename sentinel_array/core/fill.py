"""Fill variants for sequence construction.

A fill is either a fixed value repeated in every slot or a generator that
computes each slot from its index, the requested size, and the partially built
sequence.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from sentinel_array.core.sequence import SentinelArray


@dataclass(frozen=True, slots=True)
class Constant:
    """Repeat ``value`` in every slot."""

    value: Any


@dataclass(frozen=True, slots=True)
class Generator:
    """Compute each slot with ``func(index, size, partial_sequence)``.

    Trailing parameters are optional, so ``Generator(lambda i: i * i)`` works.
    """

    func: Callable[..., Any]


Fill = Union[Constant, Generator]


def _identity(index: int, size: int, partial: SentinelArray) -> int:
    return index


def identity_fill() -> Generator:
    """Default fill: every slot holds its own index."""
    return Generator(_identity)
