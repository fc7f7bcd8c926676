"""Deferred-binding logger facade.

Components create loggers with :func:`get_logger_for` (or their own
:class:`LazyLoggerFactory`) before logging is configured. Calls are buffered
until a backend is bound and then replayed in order. If the buffer fills up
first, every logger quietly switches to a void backend.
"""

from __future__ import annotations

from .domain import LogLevel
from .application import (
    DEFAULT_BUFFER_SIZE,
    BaseLogger,
    DeferredLoggerFactory,
    LazyLoggerFactory,
    Logger,
    LoggerFactory,
    LoggerFactoryNotSetError,
    SimpleLogger,
    WrappingLogger,
)
from .adapters import (
    RichConsoleLogger,
    RichConsoleLoggerFactory,
    StdlibLogger,
    StdlibLoggerFactory,
    VoidLogger,
    VoidLoggerFactory,
)
from .runtime import (
    get_global_logger_factory,
    get_logger_for,
    init,
    is_bound,
    reset_global_logger_factory,
    set_global_logger_factory,
)
from .lib_log_deferred import logdemo, summary_info

__all__ = [
    "BaseLogger",
    "DEFAULT_BUFFER_SIZE",
    "DeferredLoggerFactory",
    "LazyLoggerFactory",
    "LogLevel",
    "Logger",
    "LoggerFactory",
    "LoggerFactoryNotSetError",
    "RichConsoleLogger",
    "RichConsoleLoggerFactory",
    "SimpleLogger",
    "StdlibLogger",
    "StdlibLoggerFactory",
    "VoidLogger",
    "VoidLoggerFactory",
    "WrappingLogger",
    "get_global_logger_factory",
    "get_logger_for",
    "init",
    "is_bound",
    "logdemo",
    "reset_global_logger_factory",
    "set_global_logger_factory",
    "summary_info",
]
