"""Run shell commands with pluggable interpreters and executors."""

from shell_client.client import AsyncShellClient, ShellClient
from shell_client.command import DEFAULT_INTERPRETER, Command, Interpreter
from shell_client.errors import (
    CommandNotCaptured,
    DecodingFailure,
    LaunchFailure,
    ProcessFailure,
    ProcessSignaled,
    ShellClientError,
)
from shell_client.execution import (
    CapturingExecutor,
    LocalExecutor,
    RunMode,
    ShellExecutor,
)

__all__ = [
    "AsyncShellClient",
    "CapturingExecutor",
    "Command",
    "CommandNotCaptured",
    "DEFAULT_INTERPRETER",
    "DecodingFailure",
    "Interpreter",
    "LaunchFailure",
    "LocalExecutor",
    "ProcessFailure",
    "ProcessSignaled",
    "RunMode",
    "ShellClient",
    "ShellClientError",
    "ShellExecutor",
]
