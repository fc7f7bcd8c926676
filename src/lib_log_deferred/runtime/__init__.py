"""Process-wide entry points for obtaining and configuring loggers.

Purpose
-------
Libraries call :func:`get_logger_for` at import or construction time without
caring whether the host has configured logging yet. The host later calls
:func:`set_global_logger_factory` (or :func:`init` for the Rich console
backend) and every logger handed out so far is switched over, replaying what
was logged in the meantime.

Contents
--------
* :func:`get_logger_for` – label or instance based logger lookup.
* :func:`set_global_logger_factory` / :func:`get_global_logger_factory`.
* :func:`init` – bind a :class:`RichConsoleLoggerFactory` from settings.
* :func:`reset_global_logger_factory` / :func:`is_bound`.
"""

from __future__ import annotations

from rich.console import Console

from lib_log_deferred.adapters.console.rich_console import RichConsoleLoggerFactory
from lib_log_deferred.application.lazy import LazyLoggerFactory
from lib_log_deferred.application.ports.logger import LoggerFactory, SimpleLogger
from lib_log_deferred.config import LoggingSettings, load_settings, resolve_buffer_size
from lib_log_deferred.domain.levels import LogLevel

from ._state import current_factory, replace_factory


def get_logger_for(subject: str | object) -> SimpleLogger:
    """Return a logger labelled by ``subject``.

    Strings are used verbatim; any other object is labelled with its class
    name, so ``get_logger_for(self)`` in a constructor yields a logger named
    after the class.

    >>> class Store:
    ...     pass
    >>> reset_global_logger_factory()
    >>> handle = get_logger_for(Store())
    >>> current_factory().is_bound
    False
    """

    label = subject if isinstance(subject, str) else type(subject).__name__
    return current_factory().create_logger(label)


def set_global_logger_factory(factory: LoggerFactory) -> None:
    """Install ``factory``; pending loggers switch to it and replay their buffer."""

    current_factory().logger_factory = factory


def get_global_logger_factory() -> LoggerFactory:
    """Return the installed factory or raise :class:`LoggerFactoryNotSetError`."""

    return current_factory().logger_factory


def is_bound() -> bool:
    """Return ``True`` once a concrete factory has been installed."""

    return current_factory().is_bound


def reset_global_logger_factory(*, buffer_size: int | None = None) -> None:
    """Start over with a fresh, unbound lazy factory.

    Loggers handed out before the reset keep whatever backend they had.
    ``buffer_size`` defaults to the configured ``LOG_BUFFER_SIZE``; the other
    settings are not read.
    """

    replace_factory(LazyLoggerFactory(buffer_size=resolve_buffer_size(buffer_size)))


def init(
    *,
    level: str | LogLevel | None = None,
    force_color: bool | None = None,
    no_color: bool | None = None,
    console: Console | None = None,
) -> RichConsoleLoggerFactory:
    """Bind the Rich console backend as the process-wide factory.

    Arguments left as ``None`` are resolved through
    :func:`lib_log_deferred.config.load_settings`. Returns the installed
    factory.
    """

    settings: LoggingSettings = load_settings(
        console_level=level,
        force_color=force_color,
        no_color=no_color,
    )
    factory = RichConsoleLoggerFactory(
        settings.console_level,
        console=console,
        force_color=settings.force_color,
        no_color=settings.no_color,
    )
    set_global_logger_factory(factory)
    return factory


__all__ = [
    "current_factory",
    "get_global_logger_factory",
    "get_logger_for",
    "init",
    "is_bound",
    "reset_global_logger_factory",
    "set_global_logger_factory",
]
