"""Recording executor used in place of real processes in tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from shell_client.command import Command
from shell_client.errors import CommandNotCaptured
from shell_client.execution.base import RunMode, ShellExecutor


@dataclass(frozen=True)
class Invocation:
    """A recorded call to a capturing executor."""

    command: Command
    mode: RunMode


@dataclass
class CapturingExecutor(ShellExecutor):
    """Record commands instead of running them.

    Attributes:
        output: Bytes returned for background runs.
        failure: Optional exception raised after a command is recorded.
        invocations: Every recorded call, in order.
    """

    output: bytes = b""
    failure: Exception | None = None
    invocations: list[Invocation] = field(default_factory=list)

    @property
    def commands(self) -> list[Command]:
        return [invocation.command for invocation in self.invocations]

    @property
    def last_command(self) -> Command | None:
        return self.invocations[-1].command if self.invocations else None

    def run(self, command: Command, mode: RunMode) -> bytes:
        self.invocations.append(Invocation(command=command, mode=mode))
        if self.failure is not None:
            raise self.failure
        return self.output if mode is RunMode.BACKGROUND else b""

    async def run_async(self, command: Command, mode: RunMode) -> bytes:
        return self.run(command, mode)

    def assert_called(self) -> list[Command]:
        """Return the recorded commands, raising if there are none."""

        if not self.invocations:
            raise CommandNotCaptured("No command was run.")
        return self.commands
