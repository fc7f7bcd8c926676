from __future__ import annotations

from io import StringIO
from typing import Any, Iterator

import pytest
from rich.console import Console

from lib_log_deferred import config as log_config
from lib_log_deferred.application.loggers import BaseLogger
from lib_log_deferred.application.deferred import DEFAULT_BUFFER_SIZE
from lib_log_deferred.runtime import reset_global_logger_factory


class RecordingLogger(BaseLogger):
    """Backend logger remembering every ``log`` call it receives."""

    def __init__(self, label: str) -> None:
        self.label = label
        self.calls: list[tuple[Any, str, Any]] = []

    def log(self, level: Any, message: str, meta: Any = None) -> "RecordingLogger":
        self.calls.append((level, message, meta))
        return self


class RecordingFactory:
    """Backend factory remembering the labels it was asked for, in order."""

    def __init__(self) -> None:
        self.loggers: list[RecordingLogger] = []

    @property
    def labels(self) -> list[str]:
        return [logger.label for logger in self.loggers]

    def create_logger(self, label: str) -> RecordingLogger:
        logger = RecordingLogger(label)
        self.loggers.append(logger)
        return logger


@pytest.fixture
def recording_factory() -> RecordingFactory:
    return RecordingFactory()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=240, color_system=None)


@pytest.fixture(autouse=True)
def reset_global_runtime() -> Iterator[None]:
    reset_global_logger_factory(buffer_size=DEFAULT_BUFFER_SIZE)
    yield
    reset_global_logger_factory(buffer_size=DEFAULT_BUFFER_SIZE)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (
        log_config.BUFFER_SIZE_ENV_VAR,
        log_config.CONSOLE_LEVEL_ENV_VAR,
        log_config.FORCE_COLOR_ENV_VAR,
        log_config.NO_COLOR_ENV_VAR,
        log_config.DOTENV_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)
    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


@pytest.fixture
def factory_cls() -> type[RecordingFactory]:
    return RecordingFactory
