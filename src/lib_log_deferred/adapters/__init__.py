"""Concrete backends satisfying :class:`lib_log_deferred.application.ports.LoggerFactory`."""

from __future__ import annotations

from .console.rich_console import RichConsoleLogger, RichConsoleLoggerFactory
from .stdlib import StdlibLogger, StdlibLoggerFactory
from .void import VoidLogger, VoidLoggerFactory

__all__ = [
    "RichConsoleLogger",
    "RichConsoleLoggerFactory",
    "StdlibLogger",
    "StdlibLoggerFactory",
    "VoidLogger",
    "VoidLoggerFactory",
]
