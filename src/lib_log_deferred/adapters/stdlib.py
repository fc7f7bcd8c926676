"""Bridge forwarding log calls to the standard :mod:`logging` module.

Hosts that already configure :mod:`logging` handlers can bind this factory so
deferred handles end up in the same pipeline as the rest of the application.
Threshold filtering is left to the stdlib loggers and handlers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lib_log_deferred.application.loggers import BaseLogger
from lib_log_deferred.domain.levels import LogLevel

_EXTRA_LEVEL_NAMES = {
    LogLevel.SILLY: "SILLY",
    LogLevel.VERBOSE: "VERBOSE",
}


def register_level_names() -> None:
    """Teach :mod:`logging` the names of the levels it does not define."""
    for level, name in _EXTRA_LEVEL_NAMES.items():
        logging.addLevelName(level.to_python_level(), name)


class StdlibLogger(BaseLogger):
    """Forward calls to a :class:`logging.Logger`.

    Mapping metadata becomes ``extra`` on the record; anything else is attached
    under the ``meta`` key.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def log(self, level: LogLevel | str, message: str, meta: Any = None) -> "StdlibLogger":
        resolved = LogLevel.coerce(level)
        extra: Mapping[str, Any] | None
        if meta is None:
            extra = None
        elif isinstance(meta, Mapping):
            extra = dict(meta)
        else:
            extra = {"meta": meta}
        self._logger.log(resolved.to_python_level(), message, extra=extra)
        return self


class StdlibLoggerFactory:
    """Create :class:`StdlibLogger` instances named after the label.

    >>> factory = StdlibLoggerFactory(prefix="app")
    >>> factory.create_logger("db").name
    'app.db'
    """

    def __init__(self, *, prefix: str | None = None) -> None:
        self._prefix = prefix
        register_level_names()

    def create_logger(self, label: str) -> StdlibLogger:
        name = f"{self._prefix}.{label}" if self._prefix else label
        return StdlibLogger(logging.getLogger(name))


__all__ = ["StdlibLogger", "StdlibLoggerFactory", "register_level_names"]
