"""Logger base classes shared by every handle and backend.

Contents
--------
* :class:`BaseLogger` – derives the six level methods from a single ``log``.
* :class:`WrappingLogger` – handle delegating to a swappable inner logger.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from lib_log_deferred.application.ports.logger import SimpleLogger
from lib_log_deferred.domain.levels import LogLevel

_SelfLogger = TypeVar("_SelfLogger", bound="BaseLogger")


class BaseLogger(ABC):
    """Implement the level convenience methods on top of :meth:`log`.

    Subclasses only provide :meth:`log`; every convenience method forwards to
    it with the level fixed and returns ``self`` so calls can be chained.

    >>> class Recorder(BaseLogger):
    ...     def __init__(self):
    ...         self.calls = []
    ...     def log(self, level, message, meta=None):
    ...         self.calls.append((level.severity, message, meta))
    ...         return self
    >>> Recorder().warn("disk low").info("retrying").calls
    [('warn', 'disk low', None), ('info', 'retrying', None)]
    """

    @abstractmethod
    def log(self: _SelfLogger, level: LogLevel, message: str, meta: Any = None) -> _SelfLogger:
        """Log ``message`` at ``level`` with optional ``meta``."""

    def error(self: _SelfLogger, message: str, meta: Any = None) -> _SelfLogger:
        return self.log(LogLevel.ERROR, message, meta)

    def warn(self: _SelfLogger, message: str, meta: Any = None) -> _SelfLogger:
        return self.log(LogLevel.WARN, message, meta)

    def info(self: _SelfLogger, message: str, meta: Any = None) -> _SelfLogger:
        return self.log(LogLevel.INFO, message, meta)

    def verbose(self: _SelfLogger, message: str, meta: Any = None) -> _SelfLogger:
        return self.log(LogLevel.VERBOSE, message, meta)

    def debug(self: _SelfLogger, message: str, meta: Any = None) -> _SelfLogger:
        return self.log(LogLevel.DEBUG, message, meta)

    def silly(self: _SelfLogger, message: str, meta: Any = None) -> _SelfLogger:
        return self.log(LogLevel.SILLY, message, meta)


class WrappingLogger(BaseLogger):
    """Handle whose inner :class:`SimpleLogger` can be replaced at runtime.

    Only the factory that issued the handle rewires :attr:`logger`; callers
    keep the same handle for its whole lifetime.
    """

    def __init__(self, logger: SimpleLogger) -> None:
        self.logger: SimpleLogger = logger

    def log(self, level: LogLevel, message: str, meta: Any = None) -> "WrappingLogger":
        """Forward the call verbatim to the current inner logger."""
        self.logger.log(level, message, meta)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.logger!r})"


__all__ = ["BaseLogger", "WrappingLogger"]
