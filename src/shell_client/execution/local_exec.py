"""Local execution engine implementation."""

from __future__ import annotations

import asyncio
import logging
import subprocess
from typing import Any

from shell_client.command import Command
from shell_client.errors import LaunchFailure, ProcessFailure, ProcessSignaled
from shell_client.execution.base import RunMode, ShellExecutor
from shell_client.util.logging import get_logger


class LocalExecutor(ShellExecutor):
    """Execute commands as child processes of the current host."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize the executor.

        Args:
            logger: Logger used to report each launch. Defaults to a module logger.
        """

        self._logger = logger or get_logger(f"shell_client.{self.__class__.__name__}")

    def run(self, command: Command, mode: RunMode) -> bytes:
        """Run a command locally, blocking until it exits."""

        argv, options = self._prepare(command, mode)
        try:
            process = subprocess.Popen(argv, **options)
        except (OSError, ValueError) as exc:
            raise LaunchFailure(command, str(exc)) from exc

        with process:
            # communicate() drains both pipes before waiting on the child.
            try:
                stdout, _ = process.communicate()
            except BaseException:
                process.kill()
                raise
        return self._finish(command, process.returncode, stdout)

    async def run_async(self, command: Command, mode: RunMode) -> bytes:
        """Run a command locally without blocking the event loop.

        Cancelling the awaiting task kills the child process.
        """

        argv, options = self._prepare(command, mode)
        try:
            process = await asyncio.create_subprocess_exec(*argv, **options)
        except (OSError, ValueError) as exc:
            raise LaunchFailure(command, str(exc)) from exc

        try:
            stdout, _ = await process.communicate()
        except asyncio.CancelledError:
            if process.returncode is None:
                self._logger.debug("Cancelled; killing process %s.", process.pid)
                process.kill()
                await process.wait()
            raise
        return self._finish(command, process.returncode, stdout)

    def _prepare(self, command: Command, mode: RunMode) -> tuple[list[str], dict[str, Any]]:
        argv = command.launch_argv()
        self._logger.debug("Running in %s shell.", mode.value)
        self._logger.info("$ %s", command.command_line())

        options: dict[str, Any] = {"env": command.resolved_environment()}
        if command.working_directory is not None:
            options["cwd"] = str(command.working_directory)
        if mode is RunMode.BACKGROUND:
            options["stdout"] = subprocess.PIPE
            options["stderr"] = subprocess.PIPE
        return argv, options

    def _finish(self, command: Command, returncode: int | None, stdout: bytes | None) -> bytes:
        exit_code = 0 if returncode is None else returncode
        self._logger.debug("Command finished with exit code %s.", exit_code)
        if exit_code < 0:
            raise ProcessSignaled(command, -exit_code)
        if exit_code != 0:
            raise ProcessFailure(command, exit_code)
        return stdout or b""
