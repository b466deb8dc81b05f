"""Sequence configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass

_ALLOWED_BASES = (0, 1)


@dataclass(frozen=True, slots=True)
class SequenceConfig:
    """Indexing parameters shared by a sequence and everything derived from it.

    - ``base``: first live index, either ``1`` (default) or ``0``
    - ``not_found``: marker returned by ``find`` when nothing matches
    """

    base: int = 1
    not_found: int = -1

    def __post_init__(self) -> None:
        if self.base not in _ALLOWED_BASES:
            msg = f"base must be one of {_ALLOWED_BASES}, got {self.base!r}"
            raise ValueError(msg)
        if self.not_found >= self.base:
            msg = f"not_found marker {self.not_found} collides with live index range starting at {self.base}"
            raise ValueError(msg)

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


DEFAULT_CONFIG = SequenceConfig()
