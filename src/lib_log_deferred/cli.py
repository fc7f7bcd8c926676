"""Click command group exposing the metadata banner and the replay demo.

Contents
--------
* :func:`cli` - root group with ``--traceback`` and ``--use-dotenv`` toggles.
* :func:`cli_info` / :func:`cli_logdemo` - subcommands.
* :func:`main` - console-script entry point delegating to ``lib_cli_exit_tools``.
"""

from __future__ import annotations

from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as log_config
from .application.deferred import DEFAULT_BUFFER_SIZE
from .domain.levels import LogLevel
from .lib_log_deferred import logdemo, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LEVEL_CHOICES = [level.severity for level in LogLevel]


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--traceback/--no-traceback",
    default=None,
    help="Show full Python tracebacks when a command fails.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before running (default: ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool | None, use_dotenv: bool | None) -> None:
    """Deferred logging facade utilities."""

    if traceback is not None:
        lib_cli_exit_tools.config.traceback = traceback
        lib_cli_exit_tools.config.traceback_force_color = traceback

    if use_dotenv is None:
        use_dotenv = log_config.env_bool(log_config.DOTENV_ENV_VAR, False)
    if use_dotenv:
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--buffer-size",
    type=click.IntRange(min=1),
    default=None,
    help=f"Deferred buffer size (default: $LOG_BUFFER_SIZE or {DEFAULT_BUFFER_SIZE}).",
)
@click.option(
    "--level",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    default=None,
    help="Console threshold applied after binding (default: $LOG_CONSOLE_LEVEL or info).",
)
@click.option("--messages", type=click.IntRange(min=0), default=1, show_default=True, help="Rounds of messages per logger.")
@click.option("--bind/--no-bind", default=True, show_default=True, help="Bind the Rich console after logging.")
def cli_logdemo(buffer_size: int | None, level: str | None, messages: int, bind: bool) -> None:
    """Log through unbound loggers, then bind the console and replay."""

    settings = log_config.load_settings(buffer_size=buffer_size, console_level=level)
    result = logdemo(
        buffer_size=settings.buffer_size,
        level=settings.console_level,
        messages=messages,
        bind=bind,
    )
    click.echo(
        "emitted={emitted} buffered={buffered} replayed={replayed} fused={fused} bound={bound}".format(**result)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group through ``lib_cli_exit_tools`` and return its exit code.

    Traceback preferences toggled by ``--traceback`` are restored afterwards so
    repeated in-process runs start from the same configuration.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
