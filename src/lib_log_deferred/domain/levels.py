"""Severity levels understood by every logger handle.

Purpose
-------
Name the six severities that loggers expose as convenience methods and carry
them unchanged to whichever backend ends up receiving the call.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* ``_ICON_TABLE`` / ``_CODE_TABLE`` constants used by console backends.

System Role
-----------
The deferred facade never filters on level; ordering only matters to backends
such as :class:`lib_log_deferred.adapters.RichConsoleLoggerFactory` that apply
a threshold.
"""

from __future__ import annotations

from enum import Enum


class LogLevel(Enum):
    """Totally ordered severities, lowest first.

    Numeric values line up with the stdlib :mod:`logging` integers where a
    stdlib counterpart exists so the :mod:`logging` bridge can pass them through.
    """

    SILLY = 5
    DEBUG = 10
    VERBOSE = 15
    INFO = 20
    WARN = 30
    ERROR = 40

    @property
    def severity(self) -> str:
        """Return the lowercase severity name, e.g. ``"warn"``."""

        return self.name.lower()

    @property
    def icon(self) -> str:
        """Return the unicode glyph shown next to the level on consoles."""

        return _ICON_TABLE[self]

    @property
    def code(self) -> str:
        """Return the fixed-width four letter tag of the level."""

        return _CODE_TABLE[self]

    def to_python_level(self) -> int:
        """Return the integer handed to :meth:`logging.Logger.log`."""

        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value >= other.value

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve ``name`` case-insensitively, accepting stdlib aliases.

        >>> LogLevel.from_name("Warning")
        <LogLevel.WARN: 30>
        >>> LogLevel.from_name(" silly ")
        <LogLevel.SILLY: 5>
        """
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` whose value equals ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def coerce(cls, level: "str | LogLevel") -> "LogLevel":
        """Accept either an enum member or a level name."""
        if isinstance(level, LogLevel):
            return level
        return cls.from_name(level)


_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "ERROR",
    "FATAL": "ERROR",
}

_ICON_TABLE = {
    LogLevel.SILLY: "·",
    LogLevel.DEBUG: "🐞",
    LogLevel.VERBOSE: "…",
    LogLevel.INFO: "ℹ",
    LogLevel.WARN: "⚠",
    LogLevel.ERROR: "✖",
}
# Console glyphs displayed by the Rich backend per log level.

_CODE_TABLE = {
    LogLevel.SILLY: "SILY",
    LogLevel.DEBUG: "DEBG",
    LogLevel.VERBOSE: "VERB",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERRO",
}


__all__ = ["LogLevel"]
