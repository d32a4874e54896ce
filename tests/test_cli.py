from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from shell_client.cli.main import app
from shell_client.command import Command, Interpreter
from shell_client.errors import ProcessFailure, ProcessSignaled


def test_cli_run_background_prints_output() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["run", "--background", "--trim", "--", "echo", "hello"])

    assert result.exit_code == 0
    assert result.output.strip() == "hello"


def test_cli_run_builds_command_from_options(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    runner = CliRunner()
    captured: dict[str, Any] = {}

    def fake_run_command(command: Command, *, background: bool, trim: bool = False) -> str | None:
        captured["command"] = command
        captured["background"] = background
        captured["trim"] = trim
        return None

    monkeypatch.setattr("shell_client.cli.main.run_command", fake_run_command)

    result = runner.invoke(
        app,
        [
            "run",
            "--interpreter",
            "bash",
            "--cwd",
            str(tmp_path),
            "--env",
            "FOO=bar",
            "--",
            "echo",
            "$FOO",
        ],
    )

    assert result.exit_code == 0
    command = captured["command"]
    assert command.interpreter == Interpreter.bash()
    assert command.final_argv() == ["-c", "echo $FOO"]
    assert command.environment == {"FOO": "bar"}
    assert command.working_directory == tmp_path
    assert captured["background"] is False


def test_cli_run_uses_config_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    runner = CliRunner()
    captured: dict[str, Any] = {}
    config_path = tmp_path / "shell_client.yaml"
    config_path.write_text(
        json.dumps({"interpreter": "sh", "environment": {"A": "1"}}), encoding="utf-8"
    )

    def fake_run_command(command: Command, *, background: bool, trim: bool = False) -> str | None:
        captured["command"] = command
        return "done\n"

    monkeypatch.setattr("shell_client.cli.main.run_command", fake_run_command)

    result = runner.invoke(
        app, ["--config", str(config_path), "run", "-b", "--env", "B=2", "--", "ls"]
    )

    assert result.exit_code == 0
    assert result.output == "done\n"
    command = captured["command"]
    assert command.interpreter == Interpreter.sh()
    assert command.environment == {"A": "1", "B": "2"}


def test_cli_run_propagates_exit_code() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["run", "-i", "sh", "--", "exit", "4"])

    assert result.exit_code == 4


def test_cli_run_maps_signals(monkeypatch: pytest.MonkeyPatch) -> None:
    runner = CliRunner()

    def fake_run_command(command: Command, **_: Any) -> str | None:
        raise ProcessSignaled(command, 9)

    monkeypatch.setattr("shell_client.cli.main.run_command", fake_run_command)

    result = runner.invoke(app, ["run", "--", "sleep", "10"])

    assert result.exit_code == 137


def test_cli_run_rejects_bad_environment() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["run", "--env", "NOEQUALS", "--", "true"])

    assert result.exit_code == 1
    assert "Invalid environment assignment" in result.output


def test_cli_run_rejects_unknown_interpreter() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["run", "-i", "fish", "--", "true"])

    assert result.exit_code == 1
    assert "Unknown interpreter" in result.output


def test_cli_run_custom_interpreter() -> None:
    runner = CliRunner()

    result = runner.invoke(
        app, ["run", "-b", "-i", sys.executable, "--", "print(6 * 7)"]
    )

    assert result.exit_code == 0
    assert result.output.strip() == "42"


def test_cli_version_prints_value(monkeypatch: pytest.MonkeyPatch) -> None:
    runner = CliRunner()
    monkeypatch.setattr(
        "shell_client.cli.main.current_version", lambda client, working_directory=None: "v1.2.3"
    )

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert result.output.strip() == "v1.2.3"


def test_cli_version_reports_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    runner = CliRunner()

    def failing_version(client: Any, working_directory: Path | None = None) -> str:
        raise ProcessFailure(Command("git"), 128)

    monkeypatch.setattr("shell_client.cli.main.current_version", failing_version)

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 1
    assert "exit code 128" in result.output


def test_cli_config_prints_effective_configuration(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "shell_client.yaml"
    config_path.write_text(
        json.dumps({"interpreter": "env:bash", "environment": {"A": "1"}}), encoding="utf-8"
    )

    result = runner.invoke(app, ["--config", str(config_path), "config"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["interpreter"] == "env:bash"
    assert data["environment"] == {"A": "1"}
