"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_log_deferred"
title = "Deferred-binding logger facade with buffered replay"
version = "0.1.0"
shell_command = "lib_log_deferred"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner through ``writer``, one newline-terminated line per call.

    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_deferred:\\n'
    """

    if writer is None:
        writer = sys.stdout.write
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n")
    writer("\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")
