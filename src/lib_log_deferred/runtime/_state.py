"""Process-wide lazy factory and access helpers."""

from __future__ import annotations

from threading import RLock

from lib_log_deferred.application.lazy import LazyLoggerFactory
from lib_log_deferred.config import resolve_buffer_size

_STATE: LazyLoggerFactory | None = None
_STATE_LOCK = RLock()


def current_factory() -> LazyLoggerFactory:
    """Return the process-wide lazy factory.

    The first access builds it with the buffer size from ``LOG_BUFFER_SIZE``,
    so the variable only has to be set before the first logger is requested.
    """

    global _STATE
    with _STATE_LOCK:
        if _STATE is None:
            _STATE = LazyLoggerFactory(buffer_size=resolve_buffer_size())
        return _STATE


def replace_factory(factory: LazyLoggerFactory) -> LazyLoggerFactory | None:
    """Install ``factory`` as the process-wide lazy factory and return the old one."""

    global _STATE
    with _STATE_LOCK:
        previous = _STATE
        _STATE = factory
        return previous


__all__ = ["current_factory", "replace_factory"]
