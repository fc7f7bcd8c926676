"""Domain value objects used by the deferred logging layer."""

from __future__ import annotations

from .deferred_state import DeferredState
from .levels import LogLevel
from .records import BufferedRecord, PendingLogger

__all__ = [
    "BufferedRecord",
    "DeferredState",
    "LogLevel",
    "PendingLogger",
]
