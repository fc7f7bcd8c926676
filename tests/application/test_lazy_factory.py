from __future__ import annotations

import pytest

from lib_log_deferred.application.lazy import LazyLoggerFactory, LoggerFactoryNotSetError
from lib_log_deferred.domain.levels import LogLevel


@pytest.fixture
def lazy_factory() -> LazyLoggerFactory:
    return LazyLoggerFactory()


def test_reading_the_factory_before_it_is_set_fails(lazy_factory: LazyLoggerFactory) -> None:
    with pytest.raises(LoggerFactoryNotSetError, match="Logger factory not yet set."):
        _ = lazy_factory.logger_factory


def test_not_set_error_is_a_type_error() -> None:
    assert issubclass(LoggerFactoryNotSetError, TypeError)


def test_setting_the_factory_makes_it_readable(lazy_factory: LazyLoggerFactory, recording_factory) -> None:
    lazy_factory.logger_factory = recording_factory

    assert lazy_factory.logger_factory is recording_factory
    assert lazy_factory.is_bound is True


def test_creates_loggers_with_the_right_labels(lazy_factory: LazyLoggerFactory, recording_factory) -> None:
    lazy_factory.create_logger("LoggerA")
    lazy_factory.create_logger("LoggerB")

    lazy_factory.logger_factory = recording_factory

    assert recording_factory.labels == ["LoggerA", "LoggerB"]

    lazy_factory.create_logger("LoggerC")
    assert recording_factory.labels == ["LoggerA", "LoggerB", "LoggerC"]


def test_emits_logged_messages_after_a_factory_is_set(lazy_factory: LazyLoggerFactory, recording_factory) -> None:
    logger_a = lazy_factory.create_logger("LoggerA")
    logger_b = lazy_factory.create_logger("LoggerB")
    logger_a.warn("message1")
    logger_b.warn("message2")
    logger_b.error("message3")
    logger_a.error("message4")

    lazy_factory.logger_factory = recording_factory

    wrapped_a, wrapped_b = recording_factory.loggers
    assert wrapped_a.calls == [(LogLevel.WARN, "message1", None), (LogLevel.ERROR, "message4", None)]
    assert wrapped_b.calls == [(LogLevel.WARN, "message2", None), (LogLevel.ERROR, "message3", None)]


def test_changes_to_void_loggers_if_the_buffer_is_full(recording_factory) -> None:
    lazy_factory = LazyLoggerFactory(buffer_size=100)
    logger_a = lazy_factory.create_logger("LoggerA")
    logger_b = lazy_factory.create_logger("LoggerB")
    for _ in range(50):
        logger_a.info("info")
    for _ in range(50):
        logger_b.info("info")

    lazy_factory.logger_factory = recording_factory

    assert recording_factory.loggers == []
    logger_a.error("still dropped")
    assert recording_factory.loggers == []
    # New loggers come from the factory that was set.
    lazy_factory.create_logger("LoggerC").info("live")
    assert recording_factory.loggers[0].calls == [(LogLevel.INFO, "live", None)]


def test_replacing_the_factory_only_affects_new_loggers(factory_cls) -> None:
    first, second = factory_cls(), factory_cls()
    lazy_factory = LazyLoggerFactory()
    early = lazy_factory.create_logger("Early")
    lazy_factory.logger_factory = first

    lazy_factory.logger_factory = second
    late = lazy_factory.create_logger("Late")
    early.info("a")
    late.info("b")

    assert lazy_factory.logger_factory is second
    assert first.labels == ["Early"]
    assert second.labels == ["Late"]
    assert first.loggers[0].calls == [(LogLevel.INFO, "a", None)]
    assert second.loggers[0].calls == [(LogLevel.INFO, "b", None)]


def test_invalid_buffer_size_is_rejected() -> None:
    with pytest.raises(ValueError):
        LazyLoggerFactory(buffer_size=0)
