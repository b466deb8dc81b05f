"""Callback arity adaptation.

Combinators pass ``(value, index, sequence)`` to their callables, but the
trailing arguments are optional: ``lambda v: v > 2`` is as valid as
``lambda v, i, seq: ...``. Callables are inspected once and invoked with only
as many leading arguments as they accept.
"""

from __future__ import annotations

import inspect
import operator
from collections.abc import Callable
from typing import Any

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_SINGLE_ARGUMENT = (operator.itemgetter, operator.attrgetter, operator.methodcaller)


def _is_converter(func: Callable[..., Any]) -> bool:
    if isinstance(func, _SINGLE_ARGUMENT):
        return True
    return isinstance(func, type) and func.__module__ == "builtins"


def param_count(func: Callable[..., Any], max_args: int) -> int | None:
    """Return how many leading positional arguments ``func`` accepts, capped at ``max_args``.

    Builtin types (``str``, ``bool``, ...) and ``operator`` getters have no
    introspectable signature and take a single argument. ``None`` means the
    count could not be determined.
    """
    if _is_converter(func):
        return min(1, max_args)
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None

    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return max_args
        if param.kind in _POSITIONAL:
            count += 1
    return min(count, max_args)


def adapt_callback(func: Callable[..., Any], max_args: int) -> Callable[..., Any]:
    """Wrap ``func`` so it can always be called with ``max_args`` positional arguments."""
    count = param_count(func, max_args)
    if count == max_args:
        return func
    if count is not None:

        def call(*args: Any) -> Any:
            return func(*args[:count])

        return call

    resolved: list[int] = []

    def resolve(*args: Any) -> Any:
        # first call tries the full argument list, then fewer, and remembers what worked
        if resolved:
            return func(*args[: resolved[0]])
        for n in range(max_args, 0, -1):
            try:
                result = func(*args[:n])
            except TypeError:
                if n == 1:
                    raise
                continue
            resolved.append(n)
            return result
        return func()

    return resolve
