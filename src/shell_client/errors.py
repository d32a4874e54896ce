"""Error types raised by shell-client."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shell_client.command import Command


class ShellClientError(RuntimeError):
    """Base class for shell-client errors."""


class LaunchFailure(ShellClientError):
    """Raised when the child process could not be started."""

    def __init__(self, command: Command, reason: str) -> None:
        super().__init__(f"Unable to launch {command.interpreter}: {reason}")
        self.command = command
        self.reason = reason


class ProcessFailure(ShellClientError):
    """Raised when the child process exits with a non-zero status.

    Attributes:
        command: The command that was run.
        exit_code: Exit status reported by the process.
    """

    def __init__(self, command: Command, exit_code: int) -> None:
        super().__init__(self._message(exit_code))
        self.command = command
        self.exit_code = exit_code

    @staticmethod
    def _message(exit_code: int) -> str:
        return f"Command failed with exit code {exit_code}."


class ProcessSignaled(ProcessFailure):
    """Raised when the child process is terminated by a signal.

    ``exit_code`` carries the negative signal number, as reported by
    :mod:`subprocess`.
    """

    def __init__(self, command: Command, signal: int) -> None:
        super().__init__(command, -signal)
        self.signal = signal

    @staticmethod
    def _message(exit_code: int) -> str:
        return f"Command terminated by signal {-exit_code}."


class DecodingFailure(ShellClientError):
    """Raised when captured output cannot be decoded as requested."""


class CommandNotCaptured(ShellClientError):
    """Raised when a capturing executor recorded no commands."""
