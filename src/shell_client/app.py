"""Application wiring for CLI-friendly command execution."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Mapping, Sequence

from shell_client.client import AsyncShellClient, ShellClient
from shell_client.command import Command
from shell_client.config import ClientConfig, config_to_dict, load_config, update_interpreter
from shell_client.execution.base import ShellExecutor
from shell_client.execution.local_exec import LocalExecutor
from shell_client.util.logging import get_logger


class AppConfigError(RuntimeError):
    """Raised when configuration or runtime setup fails."""


_LOGGER = get_logger("shell_client.app")


def load_app_config(path: Path | None = None) -> ClientConfig:
    """Load configuration, wrapping parse errors in AppConfigError."""

    try:
        return load_config(path)
    except (OSError, ValueError) as exc:
        raise AppConfigError(f"Invalid configuration: {exc}") from exc


def create_executor(logger: logging.Logger | None = None) -> ShellExecutor:
    return LocalExecutor(logger=logger)


def create_client(
    executor: ShellExecutor | None = None,
    logger: logging.Logger | None = None,
) -> ShellClient:
    """Create a synchronous client, defaulting to local execution."""

    return ShellClient(executor=executor or create_executor(logger))


def create_async_client(
    executor: ShellExecutor | None = None,
    logger: logging.Logger | None = None,
) -> AsyncShellClient:
    """Create an asynchronous client, defaulting to local execution."""

    return AsyncShellClient(executor=executor or create_executor(logger))


def build_command(
    arguments: Sequence[str],
    config: ClientConfig,
    *,
    interpreter: str | None = None,
    working_directory: Path | None = None,
    environment: Mapping[str, str] | None = None,
) -> Command:
    """Build a command from CLI arguments, layering overrides onto config defaults.

    Raises:
        AppConfigError: If the interpreter name is invalid.
    """

    try:
        if interpreter is not None:
            config = update_interpreter(config, interpreter)
        resolved = config.default_interpreter()
    except ValueError as exc:
        raise AppConfigError(str(exc)) from exc

    merged_environment = {**config.environment, **(environment or {})}
    command = Command.from_arguments(
        arguments,
        interpreter=resolved,
        environment=merged_environment or None,
        working_directory=working_directory or config.working_directory,
    )
    _LOGGER.debug("Built command: %r", command)
    return command


def run_command(
    command: Command,
    *,
    background: bool,
    trim: bool = False,
    client: ShellClient | None = None,
) -> str | None:
    """Run a command, returning captured text for background runs."""

    client = client or create_client()
    if background:
        return client.background(command, trim=trim or None)
    client.foreground(command)
    return None


def parse_environment(pairs: Sequence[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` pairs.

    Raises:
        AppConfigError: If a pair has no ``=`` or an empty key.
    """

    environment: dict[str, str] = {}
    for pair in pairs:
        key, separator, value = pair.partition("=")
        if not separator or not key:
            raise AppConfigError(f"Invalid environment assignment: {pair!r}")
        environment[key] = value
    return environment


def describe_config(config: ClientConfig) -> str:
    """Render the effective configuration as JSON."""

    return json.dumps(config_to_dict(config), indent=2, sort_keys=True)
