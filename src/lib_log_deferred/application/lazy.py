"""Logger factory whose real implementation can be set after the fact.

Useful when objects are instantiated, and create their loggers, before the
logging system has been configured, as happens with dependency injection
containers. Loggers created before a factory is set buffer their messages
through a :class:`DeferredLoggerFactory` and re-emit them once it is set.
"""

from __future__ import annotations

from lib_log_deferred.application.deferred import DEFAULT_BUFFER_SIZE, DeferredLoggerFactory
from lib_log_deferred.application.ports.logger import LoggerFactory, SimpleLogger


class LoggerFactoryNotSetError(TypeError):
    """Raised when the active factory is read before one was set."""

    def __init__(self, message: str = "Logger factory not yet set.") -> None:
        super().__init__(message)


class LazyLoggerFactory:
    """Forward to a factory that may be provided later.

    >>> lazy = LazyLoggerFactory()
    >>> lazy.is_bound
    False
    >>> lazy.logger_factory  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    lib_log_deferred.application.lazy.LoggerFactoryNotSetError: Logger factory not yet set.
    """

    def __init__(self, *, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._factory: LoggerFactory = DeferredLoggerFactory(buffer_size)

    @property
    def logger_factory(self) -> LoggerFactory:
        """Return the concrete factory; raise :class:`LoggerFactoryNotSetError` before one is set."""
        if isinstance(self._factory, DeferredLoggerFactory):
            raise LoggerFactoryNotSetError()
        return self._factory

    @logger_factory.setter
    def logger_factory(self, factory: LoggerFactory) -> None:
        if isinstance(self._factory, DeferredLoggerFactory):
            self._factory.bind(factory)
        self._factory = factory

    @property
    def is_bound(self) -> bool:
        return not isinstance(self._factory, DeferredLoggerFactory)

    def create_logger(self, label: str) -> SimpleLogger:
        return self._factory.create_logger(label)


__all__ = ["LazyLoggerFactory", "LoggerFactoryNotSetError"]
