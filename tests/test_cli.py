"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import re
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_log_deferred import __init__conf__
from lib_log_deferred import cli as cli_mod
from lib_log_deferred import config as log_config
from lib_log_deferred.lib_log_deferred import summary_info

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


def run_cli(args: list[str] | None = None, **kwargs) -> tuple[int, str, BaseException | None]:
    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, args or [], prog_name=__init__conf__.shell_command, **kwargs)
    return result.exit_code, strip_ansi(result.output), result.exception


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_version_option() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert stdout.strip() == __init__conf__.version


def test_cli_traceback_toggle(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    exit_code, _stdout, _exception = run_cli(["--no-traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_cli_logdemo_replays_buffered_messages() -> None:
    exit_code, stdout, exception = run_cli(["logdemo", "--level", "silly"])

    assert exception is None
    assert exit_code == 0
    assert "[demo.producer]" in stdout
    assert "[demo.consumer]" in stdout
    assert "silly: silly message #1" in stdout
    assert "emitted=12 buffered=12 replayed=12 fused=False bound=True" in stdout


def test_cli_logdemo_small_buffer_fuses() -> None:
    exit_code, stdout, _ = run_cli(["logdemo", "--buffer-size", "3"])

    assert exit_code == 0
    assert "demo.producer" not in stdout
    assert "emitted=12 buffered=0 replayed=0 fused=True bound=False" in stdout


def test_cli_logdemo_without_bind_prints_nothing_but_the_summary() -> None:
    exit_code, stdout, _ = run_cli(["logdemo", "--no-bind", "--messages", "2"])

    assert exit_code == 0
    assert stdout.strip() == "emitted=24 buffered=24 replayed=0 fused=False bound=False"


def test_cli_logdemo_honours_environment_buffer_size() -> None:
    exit_code, stdout, _ = run_cli(["logdemo", "--no-bind"], env={"LOG_BUFFER_SIZE": "5"})

    assert exit_code == 0
    assert "fused=True" in stdout


def test_cli_logdemo_rejects_unknown_level() -> None:
    exit_code, stdout, _ = run_cli(["logdemo", "--level", "chatty"])

    assert exit_code == 2
    assert "chatty" in stdout


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over the environment toggle when deciding whether to load .env."""

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)

    exit_code, _, _ = run_cli(["--use-dotenv", "info"])
    assert exit_code == 0
    assert len(calls) == 1

    calls.clear()
    exit_code, _, _ = run_cli(["info"], env={log_config.DOTENV_ENV_VAR: "1"})
    assert exit_code == 0
    assert len(calls) == 1

    calls.clear()
    exit_code, _, _ = run_cli(["--no-use-dotenv", "info"], env={log_config.DOTENV_ENV_VAR: "1"})
    assert exit_code == 0
    assert calls == []


def test_main_returns_zero_on_success(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["info"]) == 0
    assert capsys.readouterr().out == summary_info()


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        result = CliRunner().invoke(command, argv or [])
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    assert cli_mod.main(["--no-traceback", "info"]) == 0
    assert recorded == {"traceback": False}
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True
