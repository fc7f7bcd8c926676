"""Value objects held by the deferred facade while no backend is bound."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .levels import LogLevel


@dataclass(slots=True, frozen=True)
class BufferedRecord:
    """One log call captured before a backend existed.

    Attributes
    ----------
    logger:
        Handle the call was made on; replay goes back through it.
    level:
        Severity passed by the caller.
    message:
        Message text passed by the caller.
    meta:
        Optional metadata. Kept on the record but not replayed.
    """

    logger: Any
    level: LogLevel
    message: str
    meta: Any = None


@dataclass(slots=True, frozen=True)
class PendingLogger:
    """Handle issued by the facade that still waits for a real logger."""

    logger: Any
    label: str


__all__ = ["BufferedRecord", "PendingLogger"]
