"""Helpers behind the CLI: metadata banner and the replay demo.

Contents
--------
* :func:`summary_info` – metadata banner as a string.
* :func:`logdemo` – log through deferred handles, then bind the Rich console.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console

from .adapters.console.rich_console import RichConsoleLoggerFactory
from .application.deferred import DEFAULT_BUFFER_SIZE, DeferredLoggerFactory
from .domain.levels import LogLevel

DEMO_LABELS: tuple[str, str] = ("demo.producer", "demo.consumer")


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def logdemo(
    *,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    level: str | LogLevel = LogLevel.SILLY,
    messages: int = 1,
    bind: bool = True,
    console: Console | None = None,
) -> dict[str, Any]:
    """Log one message per level on two deferred handles, then bind a console.

    Every level is logged ``messages`` times on each handle before anything is
    bound, so the output shows the buffered calls being replayed in their
    original order. A small ``buffer_size`` shows the fallback to void
    loggers instead: nothing is printed, even after binding.

    Returns
    -------
    dict[str, Any]
        ``emitted`` calls made before binding, ``buffered`` calls still held
        at bind time, ``replayed`` calls handed to the console backend on bind
        (its ``level`` threshold may still hide some of them),
        ``fused`` and ``bound`` flags.

    Examples
    --------
    >>> from io import StringIO
    >>> result = logdemo(console=Console(file=StringIO()))
    >>> result["emitted"], result["replayed"], result["fused"]
    (12, 12, False)
    >>> logdemo(buffer_size=5, console=Console(file=StringIO()))["replayed"]
    0
    """

    if messages < 0:
        raise ValueError(f"messages must not be negative, got {messages}")
    facade = DeferredLoggerFactory(buffer_size)
    handles = [facade.create_logger(label) for label in DEMO_LABELS]

    emitted = 0
    for round_number in range(1, messages + 1):
        for handle in handles:
            for severity in LogLevel:
                handle.log(severity, f"{severity.severity} message #{round_number}", {"round": round_number})
                emitted += 1

    buffered = facade.buffered_count
    fused = facade.fused
    if bind:
        factory = RichConsoleLoggerFactory(level, console=console)
        facade.bind(factory)
        for handle in handles:
            handle.info("bound to the Rich console")

    return {
        "emitted": emitted,
        "buffered": buffered,
        "replayed": buffered if bind and not fused else 0,
        "fused": fused,
        "bound": bind and not fused,
    }


__all__ = ["DEMO_LABELS", "logdemo", "summary_info"]
