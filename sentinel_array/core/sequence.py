"""Sentinel-terminated sequence container."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Final

from sentinel_array.utils.config import DEFAULT_CONFIG, SequenceConfig
from sentinel_array.utils.validation import ensure_present

ABSENT: Final = None


def scan_length(store: Mapping[int, object], base: int = 1) -> int:
    """Count populated slots from ``base`` up to the first absent one.

    A hole before the logical end silently truncates the result; keeping the
    populated run contiguous is the caller's job.
    """
    n = 0
    while store.get(base + n) is not ABSENT:
        n += 1
    return n


class SentinelArray:
    """Dense sequence backed by an index → value mapping.

    Live indices form the contiguous run ``base .. base + len - 1`` and the
    slot right after it is always absent. The length is tracked explicitly so
    lookups never rescan the store; every mutator keeps ``_length`` and the
    store in step.
    """

    __slots__ = ("_store", "_length", "_config")

    def __init__(self, values: Iterable[object] = (), *, config: SequenceConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._store: dict[int, object] = {}
        self._length = 0
        for value in values:
            self.push(value)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[int, object],
        *,
        config: SequenceConfig | None = None,
    ) -> SentinelArray:
        """Adopt the populated prefix of a raw index → value mapping.

        Entries past the first hole are not part of the sequence and are
        dropped.
        """
        seq = cls(config=config)
        base = seq.base
        length = scan_length(mapping, base)
        for offset in range(length):
            seq.push(mapping[base + offset])
        return seq

    # ------------------------------------------------------------------ #
    # properties

    @property
    def base(self) -> int:
        return self._config.base

    @property
    def config(self) -> SequenceConfig:
        return self._config

    @property
    def last_index(self) -> int:
        """Index of the final live slot (``base - 1`` when empty)."""
        return self.base + self._length - 1

    def indices(self) -> range:
        return range(self.base, self.base + self._length)

    def contains_index(self, index: int) -> bool:
        return self.base <= index <= self.last_index

    # ------------------------------------------------------------------ #
    # structural mutators; ``sentinel_array.ops`` checks bounds and reports
    # failures, these keep the store and ``_length`` in step

    def get(self, index: int) -> Any:
        """Return the value at ``index`` or ``ABSENT`` outside the live run."""
        return self._store.get(index, ABSENT)

    def push(self, value: object) -> None:
        """Write ``value`` into the first absent slot."""
        self._store[self.base + self._length] = ensure_present(value, where="push")
        self._length += 1

    def insert_at(self, index: int, value: object) -> None:
        """Shift ``index`` and everything after it up one slot, then write ``value``.

        ``index`` must be live; the slot past the end belongs to ``push``.
        """
        self._check_live(index)
        ensure_present(value, where=f"insert at index {index}")
        # highest first so nothing is overwritten before it moves
        for slot in range(self.last_index, index - 1, -1):
            self._store[slot + 1] = self._store[slot]
        self._store[index] = value
        self._length += 1

    def remove_at(self, index: int) -> Any:
        """Drop the value at ``index``, close the gap, and return the value."""
        self._check_live(index)
        removed = self._store[index]
        last = self.last_index
        for slot in range(index, last):
            self._store[slot] = self._store[slot + 1]
        del self._store[last]
        self._length -= 1
        return removed

    def _check_live(self, index: int) -> None:
        if not self.contains_index(index):
            msg = f"index {index} outside live range {self.base}..{self.last_index}"
            raise IndexError(msg)

    # ------------------------------------------------------------------ #
    # python protocol

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> Any:
        self._check_live(index)
        return self._store[index]

    def __iter__(self) -> Iterator[Any]:
        for index in self.indices():
            yield self._store[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SentinelArray):
            return self.base == other.base and self.to_list() == other.to_list()
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"SentinelArray({self.to_list()!r}, base={self.base})"

    def to_list(self) -> list[Any]:
        return list(self)

    def to_dict(self) -> dict[int, Any]:
        return {index: self._store[index] for index in self.indices()}

    def copy(self) -> SentinelArray:
        return SentinelArray(self, config=self._config)
