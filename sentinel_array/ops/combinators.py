"""Traversal combinators.

Callables receive ``(value, index, sequence)`` (``reduce`` prepends the
accumulator). Trailing parameters may be left off the callable's signature.

The index range is fixed when traversal starts. Callables may mutate the
sequence; if one shrinks it, traversal stops at the first absent slot and
elements appended along the way are not visited.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from sentinel_array.core.sequence import SentinelArray
from sentinel_array.ops.mutation import append
from sentinel_array.utils.callbacks import adapt_callback
from sentinel_array.utils.validation import ensure_present

A = TypeVar("A")


def _live_indices(seq: SentinelArray) -> Iterator[int]:
    for index in seq.indices():
        if not seq.contains_index(index):
            break
        yield index


def for_each(seq: SentinelArray, func: Callable[..., Any]) -> None:
    """Call ``func`` once per live slot in ascending order."""
    callback = adapt_callback(func, 3)
    for index in _live_indices(seq):
        callback(seq.get(index), index, seq)


def map(seq: SentinelArray, func: Callable[..., Any]) -> SentinelArray:  # noqa: A001
    """Return a new sequence holding ``func(value, index, seq)`` for every slot."""
    callback = adapt_callback(func, 3)
    result = SentinelArray(config=seq.config)
    for index in _live_indices(seq):
        value = callback(seq.get(index), index, seq)
        result.push(ensure_present(value, where=f"map result at index {index}"))
    return result


def find(seq: SentinelArray, predicate: Callable[..., Any]) -> int:
    """Return the first index whose value satisfies ``predicate``.

    Returns ``seq.config.not_found`` when no live slot matches.
    """
    test = adapt_callback(predicate, 3)
    for index in _live_indices(seq):
        if test(seq.get(index), index, seq):
            return index
    return seq.config.not_found


def reduce(seq: SentinelArray, func: Callable[..., A], initial: A) -> A:
    """Left fold: ``acc = func(acc, value, index, seq)`` over every slot."""
    step = adapt_callback(func, 4)
    acc = initial
    for index in _live_indices(seq):
        acc = step(acc, seq.get(index), index, seq)
    return acc


def find_all(seq: SentinelArray, predicate: Callable[..., Any]) -> SentinelArray:
    """Return a new sequence of every value satisfying ``predicate``, in order."""
    test = adapt_callback(predicate, 3)

    def keep(acc: SentinelArray, value: Any, index: int, sequence: SentinelArray) -> SentinelArray:
        if test(value, index, sequence):
            append(acc, value)
        return acc

    return reduce(seq, keep, SentinelArray(config=seq.config))


__all__ = ["find", "find_all", "for_each", "map", "reduce"]
