"""Command descriptors: what to run and which interpreter runs it."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Final, Iterable, Iterator, Mapping, Sequence

_SHELL_PATHS: Final[dict[str, str]] = {
    "bash": "/bin/bash",
    "csh": "/bin/csh",
    "sh": "/bin/sh",
    "tcsh": "/bin/tcsh",
    "zsh": "/bin/zsh",
    "env": "/usr/bin/env",
}


@dataclass(frozen=True, eq=False)
class Interpreter:
    """The program used to run a command's arguments.

    Built-in shells live under ``/bin`` and pass the whole command line as a
    single ``-c`` argument unless told otherwise. ``env`` locates a program on
    ``PATH`` and never wraps arguments with ``-c``; ``nested`` only records
    which interpreter the caller had in mind.

    Attributes:
        kind: One of ``bash``, ``csh``, ``sh``, ``tcsh``, ``zsh``, ``env`` or
            ``custom``.
        path: Executable path for custom interpreters.
        use_dash_c: Whether arguments are condensed into ``-c <string>``.
        nested: Interpreter wrapped by ``env``.
    """

    kind: str
    path: str | None = None
    use_dash_c: bool = True
    nested: Interpreter | None = None

    @classmethod
    def bash(cls, use_dash_c: bool = True) -> Interpreter:
        return cls("bash", use_dash_c=use_dash_c)

    @classmethod
    def csh(cls, use_dash_c: bool = True) -> Interpreter:
        return cls("csh", use_dash_c=use_dash_c)

    @classmethod
    def sh(cls, use_dash_c: bool = True) -> Interpreter:
        return cls("sh", use_dash_c=use_dash_c)

    @classmethod
    def tcsh(cls, use_dash_c: bool = True) -> Interpreter:
        return cls("tcsh", use_dash_c=use_dash_c)

    @classmethod
    def zsh(cls, use_dash_c: bool = True) -> Interpreter:
        return cls("zsh", use_dash_c=use_dash_c)

    @classmethod
    def env(cls, nested: Interpreter | None = None) -> Interpreter:
        return cls("env", use_dash_c=False, nested=nested)

    @classmethod
    def custom(cls, path: str | os.PathLike[str], use_dash_c: bool) -> Interpreter:
        return cls("custom", path=os.fspath(path), use_dash_c=use_dash_c)

    @classmethod
    def parse(cls, spec: str, use_dash_c: bool | None = None) -> Interpreter:
        """Build an interpreter from a textual name.

        Accepts a shell name (``bash``, ``zsh``, ...), ``env`` or
        ``env:<name>``, or an absolute path to a custom interpreter.

        Args:
            spec: Interpreter name or path.
            use_dash_c: Optional override of the ``-c`` wrapping flag.

        Returns:
            The matching Interpreter.

        Raises:
            ValueError: If the name is not recognized.
        """

        name = spec.strip()
        if name == "env" or name.startswith("env:"):
            _, _, nested_name = name.partition(":")
            nested = cls.parse(nested_name) if nested_name else None
            return cls.env(nested)
        if name in _SHELL_PATHS:
            return cls(name, use_dash_c=True if use_dash_c is None else use_dash_c)
        if os.path.isabs(name):
            return cls.custom(name, True if use_dash_c is None else use_dash_c)
        raise ValueError(f"Unknown interpreter: {spec!r}")

    @property
    def executable_path(self) -> str:
        if self.kind == "custom":
            return self.path or ""
        return _SHELL_PATHS[self.kind]

    @property
    def name(self) -> str:
        """Last path component of the executable."""

        parts = [part for part in self.executable_path.split("/") if part]
        return parts[-1] if parts else self.executable_path

    @property
    def wraps_with_dash_c(self) -> bool:
        if self.kind == "env":
            return False
        return self.use_dash_c

    def __str__(self) -> str:
        return self.executable_path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interpreter):
            return NotImplemented
        return (
            self.executable_path == other.executable_path
            and self.wraps_with_dash_c == other.wraps_with_dash_c
        )

    def __hash__(self) -> int:
        return hash((self.executable_path, self.wraps_with_dash_c))


DEFAULT_INTERPRETER: Final[Interpreter] = Interpreter.env()


class Command:
    """Immutable description of a shell invocation.

    The process environment is inherited at run time; any values in
    ``environment`` are added to it, replacing inherited values with the same
    key.

    Example:
        >>> Command("echo", "hi", interpreter=Interpreter.sh()).final_argv()
        ['-c', 'echo hi']
    """

    __slots__ = ("_arguments", "_environment", "_interpreter", "_working_directory")

    def __init__(
        self,
        *arguments: Any,
        interpreter: Interpreter | None = None,
        environment: Mapping[str, str] | None = None,
        working_directory: str | os.PathLike[str] | None = None,
    ) -> None:
        object.__setattr__(self, "_arguments", _freeze(arguments))
        object.__setattr__(self, "_interpreter", interpreter or DEFAULT_INTERPRETER)
        object.__setattr__(
            self,
            "_environment",
            dict(environment) if environment is not None else None,
        )
        object.__setattr__(
            self,
            "_working_directory",
            Path(working_directory) if working_directory is not None else None,
        )

    @classmethod
    def from_arguments(
        cls,
        arguments: Iterable[Any],
        *,
        interpreter: Interpreter | None = None,
        environment: Mapping[str, str] | None = None,
        working_directory: str | os.PathLike[str] | None = None,
    ) -> Command:
        """Create a command from an existing argument sequence."""

        return cls(
            *arguments,
            interpreter=interpreter,
            environment=environment,
            working_directory=working_directory,
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def arguments(self) -> tuple[Any, ...]:
        return self._arguments

    @property
    def interpreter(self) -> Interpreter:
        return self._interpreter

    @property
    def environment(self) -> dict[str, str] | None:
        if self._environment is None:
            return None
        return dict(self._environment)

    @property
    def working_directory(self) -> Path | None:
        return self._working_directory

    def flattened_arguments(self) -> list[str]:
        """Return the arguments flattened depth-first and stringified."""

        return [_stringify(argument) for argument in _flatten(self._arguments)]

    def final_argv(self, interpreter: Interpreter | None = None) -> list[str]:
        """Return the argv passed to the interpreter (excluding its path).

        Args:
            interpreter: Interpreter to build for. Defaults to the command's own.
        """

        interpreter = interpreter or self._interpreter
        arguments = self.flattened_arguments()
        if interpreter.wraps_with_dash_c and arguments:
            return ["-c", " ".join(arguments)]
        return arguments

    def launch_argv(self) -> list[str]:
        """Return the full argv, starting with the interpreter's executable."""

        return [self._interpreter.executable_path, *self.final_argv()]

    def command_line(self) -> str:
        return " ".join(self.launch_argv())

    def resolved_environment(
        self, inherited: Mapping[str, str] | None = None
    ) -> dict[str, str]:
        """Merge the environment overrides onto the inherited environment.

        Args:
            inherited: Base environment. Defaults to a snapshot of ``os.environ``.

        Returns:
            A new mapping; override values win on duplicate keys.
        """

        merged = dict(os.environ if inherited is None else inherited)
        if self._environment:
            merged.update(self._environment)
        return merged

    def with_environment(self, environment: Mapping[str, str] | None) -> Command:
        return Command(
            *self._arguments,
            interpreter=self._interpreter,
            environment=environment,
            working_directory=self._working_directory,
        )

    def in_directory(self, working_directory: str | os.PathLike[str] | None) -> Command:
        return Command(
            *self._arguments,
            interpreter=self._interpreter,
            environment=self._environment,
            working_directory=working_directory,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return (
            self.flattened_arguments() == other.flattened_arguments()
            and self._environment == other._environment
            and self._interpreter == other._interpreter
            and self._working_directory == other._working_directory
        )

    def __hash__(self) -> int:
        environment = tuple(sorted((self._environment or {}).items()))
        return hash(
            (
                tuple(self.flattened_arguments()),
                environment,
                self._interpreter,
                self._working_directory,
            )
        )

    def __repr__(self) -> str:
        return (
            f"Command(arguments={self.flattened_arguments()!r}, "
            f"interpreter={self._interpreter.executable_path!r}, "
            f"environment={self._environment!r}, "
            f"working_directory={self._working_directory!r})"
        )


def _is_nested(argument: Any) -> bool:
    return isinstance(argument, (list, tuple))


def _freeze(arguments: Sequence[Any]) -> tuple[Any, ...]:
    return tuple(_freeze(item) if _is_nested(item) else item for item in arguments)


def _flatten(arguments: Iterable[Any]) -> Iterator[Any]:
    for argument in arguments:
        if _is_nested(argument):
            yield from _flatten(argument)
        else:
            yield argument


def _stringify(argument: Any) -> str:
    if isinstance(argument, Enum):
        return str(argument.value)
    if isinstance(argument, os.PathLike):
        return os.fspath(argument)
    return str(argument)
