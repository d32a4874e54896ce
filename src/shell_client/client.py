"""High-level clients that run commands and interpret their output."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Sequence, TypeVar, Union

from shell_client.command import Command
from shell_client.errors import DecodingFailure
from shell_client.execution.base import ShellExecutor
from shell_client.execution.local_exec import LocalExecutor

T = TypeVar("T")

CommandLike = Union[Command, Sequence[Any]]
Decoder = Callable[[bytes], T]
Trim = Union[bool, str, None]


def as_command(command: CommandLike) -> Command:
    """Wrap a plain argument list in a Command using the default interpreter."""

    if isinstance(command, Command):
        return command
    if isinstance(command, (str, bytes)):
        raise TypeError("Pass a Command or a sequence of arguments, not a string.")
    return Command.from_arguments(command)


def decode_text(output: bytes, trim: Trim = None) -> str:
    """Decode captured output as UTF-8 text.

    Args:
        output: Raw captured bytes.
        trim: ``True`` strips surrounding whitespace; a string strips those
            characters from both ends; ``None``/``False`` keeps the text as is.
    """

    text = output.decode("utf-8", errors="replace")
    if trim is True:
        return text.strip()
    if isinstance(trim, str):
        return text.strip(trim)
    return text


def decode_with(output: bytes, decoder: Decoder[T]) -> T:
    """Decode captured output with a caller-supplied deserializer.

    Raises:
        DecodingFailure: If the decoder raises.
    """

    try:
        return decoder(output)
    except Exception as exc:
        raise DecodingFailure(f"Unable to decode command output: {exc}") from exc


class ShellClient:
    """Run shell commands synchronously.

    Example:
        >>> client = ShellClient()
        >>> client.background(["echo", "Foo"], trim=True)
        'Foo'
    """

    def __init__(
        self,
        executor: ShellExecutor | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            executor: Execution engine. Defaults to a LocalExecutor.
            logger: Logger handed to the default executor.
        """

        self.executor = executor or LocalExecutor(logger=logger)

    def foreground(self, command: CommandLike) -> None:
        """Run a command with the parent's stdout/stderr."""

        self.executor.run_foreground(as_command(command))

    def background_data(self, command: CommandLike) -> bytes:
        """Run a command and return its captured stdout."""

        return self.executor.run_background(as_command(command))

    def background(self, command: CommandLike, trim: Trim = None) -> str:
        """Run a command and return its captured stdout as text."""

        return decode_text(self.background_data(command), trim)

    def background_decoded(
        self,
        command: CommandLike,
        decoder: Decoder[Any] = json.loads,
    ) -> Any:
        """Run a command and decode its captured stdout (JSON by default)."""

        return decode_with(self.background_data(command), decoder)


class AsyncShellClient:
    """Run shell commands from coroutines."""

    def __init__(
        self,
        executor: ShellExecutor | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.executor = executor or LocalExecutor(logger=logger)

    async def foreground(self, command: CommandLike) -> None:
        await self.executor.run_foreground_async(as_command(command))

    async def background_data(self, command: CommandLike) -> bytes:
        return await self.executor.run_background_async(as_command(command))

    async def background(self, command: CommandLike, trim: Trim = None) -> str:
        return decode_text(await self.background_data(command), trim)

    async def background_decoded(
        self,
        command: CommandLike,
        decoder: Decoder[Any] = json.loads,
    ) -> Any:
        return decode_with(await self.background_data(command), decoder)
