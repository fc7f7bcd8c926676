"""Rich-powered console backend.

Purpose
-------
Provide a ready-made backend that prints colourised, labelled lines to the
terminal, suitable for binding into a deferred or lazy factory.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleLogger` - logger writing one line per call.
* :class:`RichConsoleLoggerFactory` - factory sharing one console and threshold.

System Role
-----------
The only backend in the package that filters on level: calls below the
factory threshold are voided. Lines look like
``2025-09-30T12:00:00+00:00 [Label] {Primary} info: message key=value``.
"""

from __future__ import annotations

import multiprocessing
import os
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Callable

from rich.console import Console
from rich.markup import escape

from lib_log_deferred.application.loggers import BaseLogger
from lib_log_deferred.domain.levels import LogLevel

_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.SILLY: "dim",
    LogLevel.DEBUG: "blue",
    LogLevel.VERBOSE: "cyan",
    LogLevel.INFO: "green",
    LogLevel.WARN: "yellow",
    LogLevel.ERROR: "bold red",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def process_tag() -> str:
    """Return ``Primary`` in the main process and ``W-<pid>`` in workers."""

    if multiprocessing.parent_process() is None:
        return "Primary"
    return f"W-{os.getpid()}"


def _format_meta(meta: Any) -> str:
    if meta is None:
        return ""
    if isinstance(meta, Mapping):
        pairs = {key: value for key, value in meta.items() if value is not None}
        if not pairs:
            return ""
        return " " + " ".join(f"{key}={value}" for key, value in sorted(pairs.items(), key=lambda item: str(item[0])))
    return f" {meta}"


class RichConsoleLogger(BaseLogger):
    """Print calls at or above ``level`` to a Rich console."""

    def __init__(
        self,
        label: str,
        *,
        level: LogLevel,
        console: Console,
        styles: Mapping[LogLevel, str],
        colorize: bool = True,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.label = label
        self.level = level
        self._console = console
        self._styles = styles
        self._colorize = colorize
        self._clock = clock

    def log(self, level: LogLevel | str, message: str, meta: Any = None) -> "RichConsoleLogger":
        resolved = LogLevel.coerce(level)
        if resolved < self.level:
            return self
        line = self.format_line(resolved, message, meta)
        style = self._styles.get(resolved, "") if self._colorize else ""
        self._console.print(escape(line), style=style, highlight=False, soft_wrap=True)
        return self

    def format_line(self, level: LogLevel, message: str, meta: Any = None) -> str:
        """Return the console line for one call, without styling."""
        timestamp = self._clock().isoformat()
        return f"{timestamp} [{self.label}] {{{process_tag()}}} {level.severity}: {message}{_format_meta(meta)}"


class RichConsoleLoggerFactory:
    """Create :class:`RichConsoleLogger` instances sharing one console.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True, width=200)
    >>> factory = RichConsoleLoggerFactory("warn", console=console)
    >>> _ = factory.create_logger("Demo").info("hidden").warn("shown")
    >>> text = console.export_text()
    >>> "hidden" in text, "[Demo]" in text, "warn: shown" in text
    (False, True, True)
    """

    def __init__(
        self,
        level: LogLevel | str = LogLevel.INFO,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[LogLevel | str, str] | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.level = LogLevel.coerce(level)
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            merged[LogLevel.coerce(key)] = value
        self._style_map = merged
        self._clock = clock

    @property
    def console(self) -> Console:
        return self._console

    @property
    def styles(self) -> Mapping[LogLevel, str]:
        return dict(self._style_map)

    def create_logger(self, label: str) -> RichConsoleLogger:
        return RichConsoleLogger(
            label,
            level=self.level,
            console=self._console,
            styles=self._style_map,
            colorize=not self._no_color,
            clock=self._clock,
        )


__all__ = ["RichConsoleLogger", "RichConsoleLoggerFactory", "process_tag"]
