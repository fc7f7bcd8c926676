"""Application layer: logger base classes, the deferred facade, and the lazy wrapper."""

from __future__ import annotations

# Import order matters: ``deferred`` pulls in the void adapter, which needs ``loggers``.
from .ports import Logger, LoggerFactory, SimpleLogger
from .loggers import BaseLogger, WrappingLogger
from .deferred import DEFAULT_BUFFER_SIZE, DeferredLoggerFactory
from .lazy import LazyLoggerFactory, LoggerFactoryNotSetError

__all__ = [
    "BaseLogger",
    "DEFAULT_BUFFER_SIZE",
    "DeferredLoggerFactory",
    "LazyLoggerFactory",
    "Logger",
    "LoggerFactory",
    "LoggerFactoryNotSetError",
    "SimpleLogger",
    "WrappingLogger",
]
