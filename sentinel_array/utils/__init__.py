"""Utility exports."""

from .callbacks import adapt_callback, param_count
from .config import DEFAULT_CONFIG, SequenceConfig
from .logging import get_logger
from .validation import AbsentValueError, ensure_present, ensure_size

__all__ = [
    "DEFAULT_CONFIG",
    "SequenceConfig",
    "AbsentValueError",
    "adapt_callback",
    "param_count",
    "ensure_present",
    "ensure_size",
    "get_logger",
]
