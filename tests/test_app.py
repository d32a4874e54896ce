from __future__ import annotations

import json
from pathlib import Path

import pytest

from shell_client.app import (
    AppConfigError,
    build_command,
    create_async_client,
    create_client,
    describe_config,
    load_app_config,
    parse_environment,
    run_command,
)
from shell_client.command import Command, Interpreter
from shell_client.config import ClientConfig
from shell_client.execution.capturing import CapturingExecutor
from shell_client.execution.local_exec import LocalExecutor


def test_parse_environment() -> None:
    assert parse_environment(["A=1", "B=x=y", "C="]) == {"A": "1", "B": "x=y", "C": ""}
    with pytest.raises(AppConfigError):
        parse_environment(["=1"])


def test_build_command_layers_overrides(tmp_path: Path) -> None:
    config = ClientConfig(interpreter="zsh", environment={"A": "1", "B": "1"})

    command = build_command(
        ["echo", "hi"],
        config,
        interpreter="sh",
        working_directory=tmp_path,
        environment={"B": "2"},
    )

    assert command == Command(
        "echo",
        "hi",
        interpreter=Interpreter.sh(),
        environment={"A": "1", "B": "2"},
        working_directory=tmp_path,
    )


def test_build_command_rejects_unknown_interpreter() -> None:
    with pytest.raises(AppConfigError):
        build_command(["true"], ClientConfig(), interpreter="fish")


def test_run_command_modes() -> None:
    executor = CapturingExecutor(output=b" text \n")
    client = create_client(executor=executor)

    assert run_command(Command("echo"), background=True, trim=True, client=client) == "text"
    assert run_command(Command("echo"), background=False, client=client) is None
    assert len(executor.invocations) == 2


def test_create_clients_default_to_local_execution() -> None:
    assert isinstance(create_client().executor, LocalExecutor)
    assert isinstance(create_async_client().executor, LocalExecutor)


def test_load_app_config_wraps_errors(tmp_path: Path) -> None:
    config_path = tmp_path / "shell_client.yaml"
    config_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(AppConfigError):
        load_app_config(config_path)


def test_build_command_interpreter_override_resets_dash_c_flag() -> None:
    config = ClientConfig(interpreter="bash", use_dash_c=False)

    command = build_command(["echo", "hi"], config, interpreter="zsh")

    assert command.interpreter == Interpreter.zsh()
    assert command.final_argv() == ["-c", "echo hi"]


def test_describe_config_renders_json(tmp_path: Path) -> None:
    config = ClientConfig(interpreter="sh", environment={"A": "1"}, working_directory=tmp_path)

    data = json.loads(describe_config(config))

    assert data == {
        "environment": {"A": "1"},
        "interpreter": "sh",
        "log_level": "INFO",
        "use_dash_c": None,
        "working_directory": str(tmp_path),
    }
