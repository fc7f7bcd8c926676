"""Deferred logger factory buffering log calls until a backend is bound.

Purpose
-------
Let components create loggers before the host application configured any
logging backend. Calls made in the meantime are kept in memory and replayed,
in the order they happened, once :meth:`DeferredLoggerFactory.bind` receives a
real factory.

Contents
--------
* :data:`DEFAULT_BUFFER_SIZE` – default number of calls kept before giving up.
* :class:`DeferredLoggerFactory` – the facade handing out swappable handles.
* :class:`_BufferingLogger` – inner logger of a handle that is not bound yet.

System Role
-----------
If the buffer fills up before anything was bound we assume no backend will
ever be configured (e.g. a library used as a dependency by a host that never
touches logging). Every handle is then switched to a void logger and the
buffer is dropped, so memory stays bounded and users are not forced to set up
logging just to use the dependency.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from lib_log_deferred.adapters.void import VoidLogger, VoidLoggerFactory
from lib_log_deferred.application.loggers import WrappingLogger
from lib_log_deferred.application.ports.logger import LoggerFactory, SimpleLogger
from lib_log_deferred.domain.deferred_state import DeferredState
from lib_log_deferred.domain.levels import LogLevel
from lib_log_deferred.domain.records import BufferedRecord

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 1024
"""Number of buffered calls after which the facade switches to void loggers."""


class _BufferingLogger:
    """Record calls of one handle into the facade's shared state."""

    __slots__ = ("handle", "_state", "_on_exhausted")

    def __init__(self, state: DeferredState, on_exhausted: Callable[[], None]) -> None:
        self.handle: WrappingLogger | None = None
        self._state = state
        self._on_exhausted = on_exhausted

    def log(self, level: LogLevel, message: str, meta: Any = None) -> WrappingLogger | None:
        state = self._state
        if state.remaining > 0:
            # The call that would take the last slot is dropped together with the buffer.
            if state.consume() == 0:
                state.fuse()
                self._on_exhausted()
            else:
                state.append(BufferedRecord(logger=self.handle, level=level, message=message, meta=meta))
        return self.handle


class DeferredLoggerFactory:
    """Factory whose loggers buffer until :meth:`bind` supplies a backend.

    Parameters
    ----------
    buffer_size:
        Maximum number of calls buffered across all handles. Reaching it
        before :meth:`bind` fuses the factory into void mode.
    fallback_factory:
        Zero-argument callable producing the factory installed on fusing.

    Examples
    --------
    >>> class Printer:
    ...     def __init__(self, label):
    ...         self.label = label
    ...     def log(self, level, message, meta=None):
    ...         print(self.label, level.severity, message)
    ...         return self
    >>> class PrinterFactory:
    ...     def create_logger(self, label):
    ...         return Printer(label)
    >>> factory = DeferredLoggerFactory()
    >>> db = factory.create_logger("db")
    >>> _ = db.info("connecting").warn("slow handshake")
    >>> factory.bind(PrinterFactory())
    db info connecting
    db warn slow handshake
    >>> _ = db.error("gone")
    db error gone
    """

    def __init__(
        self,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        *,
        fallback_factory: Callable[[], LoggerFactory] = VoidLoggerFactory,
    ) -> None:
        self._state = DeferredState(capacity=buffer_size)
        self._fallback_factory = fallback_factory
        self._target: LoggerFactory | None = None

    @property
    def buffer_size(self) -> int:
        """Number of calls the facade buffers before falling back."""
        return self._state.capacity

    @property
    def remaining_capacity(self) -> int:
        """Calls left before the buffer runs out."""
        return self._state.remaining

    @property
    def buffered_count(self) -> int:
        """Number of calls currently waiting for replay."""
        return len(self._state)

    @property
    def pending_count(self) -> int:
        """Number of handles still waiting for a real logger."""
        return self._state.pending_count

    @property
    def fused(self) -> bool:
        """``True`` once the buffer ran out before a backend was bound."""
        return self._state.fused

    @property
    def bound(self) -> bool:
        """``True`` once a backend was bound and the buffer did not run out first."""
        return self._target is not None and not self._state.fused

    def create_logger(self, label: str) -> WrappingLogger:
        """Return a handle for ``label``.

        Before binding the handle buffers its calls and is tracked for
        rewiring. After binding it wraps a logger of the bound factory; after
        fusing it wraps a :class:`VoidLogger` and is never buffered.
        """
        if self._state.fused:
            return WrappingLogger(VoidLogger())
        if self._target is not None:
            return WrappingLogger(self._target.create_logger(label))
        buffering = _BufferingLogger(self._state, self._fuse)
        handle = WrappingLogger(buffering)
        buffering.handle = handle
        self._state.register(handle, label)
        return handle

    def bind(self, factory: LoggerFactory) -> None:
        """Swap every pending handle to ``factory`` and replay the buffer.

        Real loggers are created in handle-creation order; buffered calls are
        replayed in the global order they were made, through the handles they
        were made on. Only level and message are replayed, metadata is not.
        Errors raised by ``factory`` propagate unchanged. On a fused factory
        this does nothing.
        """
        if self._state.fused:
            logger.debug("Ignoring bind to %r: deferred log buffer already exhausted", factory)
            return
        self._rewire(factory)

    def _rewire(self, factory: LoggerFactory) -> None:
        self._target = factory
        pending = self._state.take_pending()
        for entry in pending:
            inner: SimpleLogger = factory.create_logger(entry.label)
            entry.logger.logger = inner
        records = self._state.take_records()
        for record in records:
            record.logger.log(record.level, record.message)
        if pending or records:
            logger.debug(
                "Bound %d deferred loggers to %s and replayed %d buffered calls",
                len(pending),
                type(factory).__name__,
                len(records),
            )

    def _fuse(self) -> None:
        logger.debug(
            "Deferred log buffer of %d calls exhausted before a backend was bound; switching to %s",
            self._state.capacity,
            getattr(self._fallback_factory, "__name__", repr(self._fallback_factory)),
        )
        self._rewire(self._fallback_factory())


__all__ = ["DEFAULT_BUFFER_SIZE", "DeferredLoggerFactory"]
