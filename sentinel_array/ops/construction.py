"""Sequence construction and length queries."""

from __future__ import annotations

from collections.abc import Mapping

from sentinel_array.core.fill import Constant, Fill, Generator, identity_fill
from sentinel_array.core.sequence import SentinelArray, scan_length
from sentinel_array.utils.callbacks import adapt_callback
from sentinel_array.utils.config import DEFAULT_CONFIG, SequenceConfig
from sentinel_array.utils.logging import get_logger
from sentinel_array.utils.validation import ensure_present, ensure_size

_LOGGER = get_logger("construction")


def get_length(seq: SentinelArray | Mapping[int, object], *, base: int | None = None) -> int:
    """Return the number of populated slots in ``seq``.

    ``SentinelArray`` instances report their tracked length. Raw mappings are
    scanned from ``base`` (the default config's base when omitted) up to the
    first absent slot.
    """
    if isinstance(seq, SentinelArray):
        return len(seq)
    start = DEFAULT_CONFIG.base if base is None else base
    return scan_length(seq, start)


def create_array(
    n: int,
    fill: Fill | None = None,
    *,
    config: SequenceConfig | None = None,
) -> SentinelArray:
    """Build a sequence of exactly ``n`` slots.

    ``Constant(value)`` repeats ``value``; ``Generator(func)`` calls
    ``func(index, n, partial)`` once per slot in ascending order, where
    ``partial`` already holds every earlier slot. Without a fill each slot
    holds its own index.
    """
    size = ensure_size(n)
    if fill is None:
        fill = identity_fill()

    seq = SentinelArray(config=config)
    if isinstance(fill, Constant):
        value = ensure_present(fill.value, where="create_array constant fill")
        for _ in range(size):
            seq.push(value)
    elif isinstance(fill, Generator):
        func = adapt_callback(fill.func, 3)
        for index in range(seq.base, seq.base + size):
            value = func(index, size, seq)
            seq.push(ensure_present(value, where=f"create_array generator at index {index}"))
    else:
        msg = f"fill must be Constant or Generator, got {type(fill).__name__}"
        raise TypeError(msg)

    _LOGGER.debug("Created sequence size=%d base=%d", size, seq.base)
    return seq


__all__ = ["create_array", "get_length"]
