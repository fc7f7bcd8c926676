"""Console backends."""

from __future__ import annotations

from .rich_console import RichConsoleLogger, RichConsoleLoggerFactory

__all__ = ["RichConsoleLogger", "RichConsoleLoggerFactory"]
