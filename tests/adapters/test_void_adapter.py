from __future__ import annotations

import pytest

from lib_log_deferred.adapters.void import VoidLogger, VoidLoggerFactory
from lib_log_deferred.domain.levels import LogLevel


def test_void_factory_creates_void_loggers() -> None:
    factory = VoidLoggerFactory()

    assert isinstance(factory.create_logger("MyLabel"), VoidLogger)
    assert factory.create_logger("a") is not factory.create_logger("a")


@pytest.mark.parametrize("level", LogLevel)
def test_void_logger_discards_and_returns_itself(level: LogLevel) -> None:
    logger = VoidLogger()

    assert logger.log(level, "ignored", {"meta": 1}) is logger
    assert logger.error("ignored").silly("ignored") is logger
