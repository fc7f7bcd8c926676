"""Backend that discards every log call.

Installed automatically by the deferred facade when its buffer fills before a
real backend was bound, and usable directly to silence a library.
"""

from __future__ import annotations

from typing import Any

from lib_log_deferred.application.loggers import BaseLogger
from lib_log_deferred.domain.levels import LogLevel


class VoidLogger(BaseLogger):
    """Logger that does nothing."""

    def log(self, level: LogLevel, message: str, meta: Any = None) -> "VoidLogger":
        return self


class VoidLoggerFactory:
    """Hand out :class:`VoidLogger` instances for every label."""

    def create_logger(self, label: str) -> VoidLogger:
        return VoidLogger()


__all__ = ["VoidLogger", "VoidLoggerFactory"]
