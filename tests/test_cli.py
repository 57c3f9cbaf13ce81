"""CLI behaviour coverage for the click entry point."""

from __future__ import annotations

import re
import sys
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_log_bridge import __init__conf__
from lib_log_bridge import cli as cli_mod
from lib_log_bridge.runtime import summary_info

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


def run_cli(args: list[str] | None = None) -> tuple[int, str, BaseException | None]:
    """Invoke the click group with ``CliRunner`` and capture output."""

    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, args or [], prog_name=__init__conf__.shell_command)
    return result.exit_code, result.output, result.exception


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_version_flag() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert stdout.strip() == __init__conf__.version


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    """`--no-traceback` should disable verbose tracebacks for subsequent commands."""

    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    exit_code, _stdout, _exception = run_cli(["--no-traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_cli_levels_prints_the_mapping_table() -> None:
    exit_code, stdout, _ = run_cli(["levels"])

    assert exit_code == 0
    rows = {line.split()[1]: line for line in strip_ansi(stdout).splitlines() if len(line.split()) > 1}
    assert "TRACE" in rows["FINEST"]
    assert "DEBUG" in rows["FINE"]
    assert "ERROR" in rows["SEVERE"]


def test_cli_levels_shows_custom_levels_under_the_chosen_policy() -> None:
    exit_code, stdout, _ = run_cli(["levels", "--policy", "nearest", "--custom", "AUDIT=950"])

    assert exit_code == 0
    audit_line = next(line for line in strip_ansi(stdout).splitlines() if "AUDIT" in line)
    assert "WARNING" in audit_line
    assert "custom" in audit_line


def test_cli_levels_rejects_malformed_custom_levels() -> None:
    exit_code, stdout, _ = run_cli(["levels", "--custom", "AUDIT"])

    assert exit_code == 2
    assert "NAME=VALUE" in stdout


def test_cli_logdemo_emits_every_level() -> None:
    exit_code, stdout, _ = run_cli(["logdemo", "--no-color"])

    assert exit_code == 0
    plain_output = strip_ansi(stdout)
    assert "=== logdemo: logger 'demo', root level TRACE ===" in plain_output
    assert "FINEST message through the legacy facade" in plain_output
    assert "custom level AUDIT" in plain_output
    assert "[lib_log_bridge.cli]" in plain_output
    assert "emitted 8 of 8 records" in plain_output


@pytest.mark.parametrize(("policy", "expected"), [("default", 2), ("nearest", 3)])
def test_cli_logdemo_honours_root_level_and_policy(policy: str, expected: int) -> None:
    exit_code, stdout, _ = run_cli(["logdemo", "--root-level", "warning", "--policy", policy, "--no-color"])

    assert exit_code == 0
    assert f"emitted {expected} of 8 records" in stdout


def test_cli_logdemo_passes_options(monkeypatch: pytest.MonkeyPatch) -> None:
    recorded: dict[str, object] = {}

    def fake_logdemo(**kwargs: object) -> dict[str, object]:
        recorded.update(kwargs)
        return {"logger": kwargs["logger_name"], "root_level": "INFO", "events": [{"ok": True}, {"ok": False}]}

    monkeypatch.setattr(cli_mod, "_logdemo", fake_logdemo)

    exit_code, stdout, _ = run_cli(["logdemo", "--logger-name", "app.web", "--force-color"])

    assert exit_code == 0
    assert recorded["logger_name"] == "app.web"
    assert recorded["force_color"] is True
    assert "emitted 1 of 2 records" in stdout


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        runner = CliRunner()
        result = runner.invoke(command, ["info"] if argv is None else argv)
        if result.exception is not None:
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["traceback_force_color"] = lib_cli_exit_tools.config.traceback_force_color
        recorded["prog_name"] = prog_name == __init__conf__.shell_command
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": True, "traceback_force_color": True, "prog_name": True}
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_main_consumes_sys_argv(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "info"], raising=False)

    exit_code = cli_mod.main()
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Info for lib_log_bridge" in captured.out
