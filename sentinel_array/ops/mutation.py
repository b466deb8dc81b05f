"""In-place structural mutation.

Every operation here either leaves the sequence untouched and reports why, or
shifts elements so the live run stays contiguous and the slot after it stays
absent.
"""

from __future__ import annotations

from sentinel_array.core.results import FailureReason, MutationResult
from sentinel_array.core.sequence import ABSENT, SentinelArray
from sentinel_array.utils.logging import get_logger

_LOGGER = get_logger("mutation")


def _reject(op: str, seq: SentinelArray, reason: FailureReason, index: int | None = None) -> MutationResult:
    _LOGGER.debug(
        "%s rejected (%s): index=%s live=%d..%d",
        op,
        reason.value,
        index,
        seq.base,
        seq.last_index,
    )
    return MutationResult.failure(reason)


def remove(seq: SentinelArray, n: int) -> MutationResult:
    """Remove the element at ``n`` and close the gap.

    Fails with ``OUT_OF_RANGE`` unless ``n`` is a live index.
    """
    if not seq.contains_index(n):
        return _reject("remove", seq, FailureReason.OUT_OF_RANGE, n)

    return MutationResult.success(seq.remove_at(n))


def insert(seq: SentinelArray, n: int, val: object) -> MutationResult:
    """Insert ``val`` at ``n``, shifting later elements up by one.

    ``n`` must be a live index; the slot past the end belongs to ``append``.
    """
    if not seq.contains_index(n):
        return _reject("insert", seq, FailureReason.OUT_OF_RANGE, n)
    if val is ABSENT:
        return _reject("insert", seq, FailureReason.ABSENT_VALUE, n)

    seq.insert_at(n, val)
    return MutationResult.success()


def append(seq: SentinelArray, val: object) -> MutationResult:
    """Write ``val`` into the first absent slot."""
    if val is ABSENT:
        return _reject("append", seq, FailureReason.ABSENT_VALUE)
    seq.push(val)
    return MutationResult.success()


__all__ = ["append", "insert", "remove"]
