"""Execution engine package."""

from shell_client.execution.base import RunMode, ShellExecutor
from shell_client.execution.capturing import CapturingExecutor, Invocation
from shell_client.execution.local_exec import LocalExecutor

__all__ = ["CapturingExecutor", "Invocation", "LocalExecutor", "RunMode", "ShellExecutor"]
