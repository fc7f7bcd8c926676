"""Logger ports shared by handles, the deferred facade, and backends.

Purpose
-------
Describe the narrow contracts the deferred layer consumes from concrete
backends and exposes to callers.

Contents
--------
* :class:`SimpleLogger` – anything with a ``log(level, message, meta)`` method.
* :class:`Logger` – a :class:`SimpleLogger` with per-level convenience methods.
* :class:`LoggerFactory` – creates a logger for a label.

System Role
-----------
Backends (Rich console, stdlib bridge, void) satisfy these protocols
structurally, so third-party factories plug in without subclassing anything.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from lib_log_deferred.domain.levels import LogLevel


@runtime_checkable
class SimpleLogger(Protocol):
    """Log a message at a given level."""

    def log(self, level: LogLevel, message: str, meta: Any = None) -> "SimpleLogger":
        """Log ``message`` at ``level``; backends may void it below their threshold."""


@runtime_checkable
class Logger(SimpleLogger, Protocol):
    """Logger with convenience methods for every severity."""

    def log(self, level: LogLevel, message: str, meta: Any = None) -> "Logger": ...

    def error(self, message: str, meta: Any = None) -> "Logger": ...

    def warn(self, message: str, meta: Any = None) -> "Logger": ...

    def info(self, message: str, meta: Any = None) -> "Logger": ...

    def verbose(self, message: str, meta: Any = None) -> "Logger": ...

    def debug(self, message: str, meta: Any = None) -> "Logger": ...

    def silly(self, message: str, meta: Any = None) -> "Logger": ...


@runtime_checkable
class LoggerFactory(Protocol):
    """Instantiate loggers by label."""

    def create_logger(self, label: str) -> SimpleLogger:
        """Create a logger identified by ``label`` (display and grouping only)."""


__all__ = ["Logger", "LoggerFactory", "SimpleLogger"]
