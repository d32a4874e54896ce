"""Execution engine base types and interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from shell_client.command import Command


class RunMode(str, Enum):
    """How a command's output streams are handled.

    ``FOREGROUND`` inherits the parent's stdout/stderr. ``BACKGROUND``
    captures both and returns stdout.
    """

    FOREGROUND = "foreground"
    BACKGROUND = "background"


class ShellExecutor(ABC):
    """Abstract base class for command execution engines."""

    @abstractmethod
    def run(self, command: Command, mode: RunMode) -> bytes:
        """Run a command and return its captured output.

        Args:
            command: The command to execute.
            mode: Whether to inherit or capture the output streams.

        Returns:
            Captured stdout for background runs, ``b""`` for foreground runs.

        Raises:
            LaunchFailure: If the process could not be started.
            ProcessFailure: If the process exited with a non-zero status.
        """

    @abstractmethod
    async def run_async(self, command: Command, mode: RunMode) -> bytes:
        """Asynchronous counterpart of :meth:`run`."""

    def run_foreground(self, command: Command) -> None:
        self.run(command, RunMode.FOREGROUND)

    def run_background(self, command: Command) -> bytes:
        return self.run(command, RunMode.BACKGROUND)

    async def run_foreground_async(self, command: Command) -> None:
        await self.run_async(command, RunMode.FOREGROUND)

    async def run_background_async(self, command: Command) -> bytes:
        return await self.run_async(command, RunMode.BACKGROUND)
