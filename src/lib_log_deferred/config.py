"""Environment-driven configuration for the deferred logging layer.

Purpose
-------
Resolve the few knobs the package exposes (buffer size, console threshold,
colour switches) from explicit arguments, ``LOG_*`` environment variables and
an optional ``.env`` file, in that order of precedence.

Contents
--------
* :class:`LoggingSettings` – resolved, immutable settings.
* :func:`load_settings` – merge arguments, environment, and defaults.
* :func:`resolve_buffer_size` – the buffer size alone, same precedence.
* :func:`enable_dotenv` – load the nearest ``.env`` once per process.
* :data:`DOTENV_ENV_VAR` – environment toggle consulted by the CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from lib_log_deferred.application.deferred import DEFAULT_BUFFER_SIZE
from lib_log_deferred.domain.levels import LogLevel

DOTENV_ENV_VAR = "LIB_LOG_DEFERRED_USE_DOTENV"
"""Truthy value makes the CLI call :func:`enable_dotenv` before running."""

BUFFER_SIZE_ENV_VAR = "LOG_BUFFER_SIZE"
CONSOLE_LEVEL_ENV_VAR = "LOG_CONSOLE_LEVEL"
FORCE_COLOR_ENV_VAR = "LOG_FORCE_COLOR"
NO_COLOR_ENV_VAR = "LOG_NO_COLOR"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOADED: Path | None = None
_DOTENV_ATTEMPTED = False


@dataclass(slots=True, frozen=True)
class LoggingSettings:
    """Resolved configuration values."""

    buffer_size: int = DEFAULT_BUFFER_SIZE
    console_level: LogLevel = LogLevel.INFO
    force_color: bool = False
    no_color: bool = False


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = 'off'
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL')
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def env_int(name: str, default: int) -> int:
    """Return an integer environment variable, raising ``ValueError`` on garbage."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


def resolve_buffer_size(buffer_size: int | None = None) -> int:
    """Return ``buffer_size`` or ``LOG_BUFFER_SIZE`` or the default.

    Only the buffer size is read, so unrelated settings with bad values do not
    get in the way.

    >>> resolve_buffer_size(16)
    16
    """
    if buffer_size is None:
        buffer_size = env_int(BUFFER_SIZE_ENV_VAR, DEFAULT_BUFFER_SIZE)
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be a positive integer, got {buffer_size!r}")
    return buffer_size


def load_settings(
    *,
    buffer_size: int | None = None,
    console_level: str | LogLevel | None = None,
    force_color: bool | None = None,
    no_color: bool | None = None,
) -> LoggingSettings:
    """Merge explicit arguments, environment variables, and defaults.

    Arguments left as ``None`` fall back to ``LOG_BUFFER_SIZE``,
    ``LOG_CONSOLE_LEVEL``, ``LOG_FORCE_COLOR``, and ``LOG_NO_COLOR``, then to
    the :class:`LoggingSettings` defaults.

    Raises
    ------
    ValueError
        When the buffer size is not positive or a level name is unknown.
    """

    defaults = LoggingSettings()
    buffer_size = resolve_buffer_size(buffer_size)
    if console_level is None:
        console_level = os.getenv(CONSOLE_LEVEL_ENV_VAR) or defaults.console_level
    if force_color is None:
        force_color = env_bool(FORCE_COLOR_ENV_VAR, defaults.force_color)
    if no_color is None:
        no_color = env_bool(NO_COLOR_ENV_VAR, defaults.no_color)
    return LoggingSettings(
        buffer_size=buffer_size,
        console_level=LogLevel.coerce(console_level),
        force_color=force_color,
        no_color=no_color,
    )


def enable_dotenv(path: str | Path | None = None) -> Path | None:
    """Load ``path`` or the nearest ``.env`` above the working directory.

    Existing environment variables keep precedence. The lookup only happens
    once per process; later calls return the first result.
    """

    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    if _DOTENV_ATTEMPTED:
        return _DOTENV_LOADED
    _DOTENV_ATTEMPTED = True
    candidate = str(path) if path is not None else find_dotenv(usecwd=True)
    if not candidate:
        return None
    resolved = Path(candidate).resolve()
    if not resolved.is_file():
        return None
    load_dotenv(resolved, override=False)
    _DOTENV_LOADED = resolved
    return resolved


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    _DOTENV_LOADED = None
    _DOTENV_ATTEMPTED = False


__all__ = [
    "BUFFER_SIZE_ENV_VAR",
    "CONSOLE_LEVEL_ENV_VAR",
    "DOTENV_ENV_VAR",
    "FORCE_COLOR_ENV_VAR",
    "LoggingSettings",
    "NO_COLOR_ENV_VAR",
    "enable_dotenv",
    "env_bool",
    "env_int",
    "load_settings",
    "resolve_buffer_size",
]
