"""Mutation outcome containers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FailureReason(Enum):
    """Why a structural mutation was rejected."""

    OUT_OF_RANGE = "out_of_range"
    ABSENT_VALUE = "absent_value"


@dataclass(frozen=True, slots=True)
class MutationResult:
    """Outcome of ``insert``/``remove``/``append``.

    Truthy on success so callers can keep treating it as a boolean. On failure
    ``reason`` says what was wrong; ``value`` holds the removed element for a
    successful ``remove``.
    """

    ok: bool
    reason: FailureReason | None = None
    value: Any = None

    @classmethod
    def success(cls, value: Any = None) -> MutationResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: FailureReason) -> MutationResult:
        return cls(ok=False, reason=reason)

    def __bool__(self) -> bool:
        return self.ok
