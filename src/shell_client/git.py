"""Git helpers built on the shell client."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from shell_client.client import ShellClient
from shell_client.command import Command, Interpreter
from shell_client.errors import ProcessFailure
from shell_client.util.logging import get_logger


class DescribeArg(str, Enum):
    EXACT_MATCH = "--exact-match"
    TAGS = "--tags"


class RevParseArg(str, Enum):
    HEAD = "HEAD"


def git_command(
    subcommand: str,
    *arguments: str | Enum,
    interpreter: Interpreter | None = None,
    working_directory: Path | None = None,
) -> Command:
    """Build a ``git <subcommand> ...`` command."""

    return Command(
        "git",
        subcommand,
        list(arguments),
        interpreter=interpreter,
        working_directory=working_directory,
    )


def describe(working_directory: Path | None = None) -> Command:
    return git_command("describe", *DescribeArg, working_directory=working_directory)


def rev_parse(working_directory: Path | None = None) -> Command:
    return git_command("rev-parse", *RevParseArg, working_directory=working_directory)


def current_version(
    client: ShellClient,
    working_directory: Path | None = None,
    logger: logging.Logger | None = None,
) -> str:
    """Return the exact git tag of HEAD, or the commit sha when untagged.

    Args:
        client: Client used to run git.
        working_directory: Repository to inspect. Defaults to the current directory.
        logger: Logger for the fallback warning.

    Raises:
        ProcessFailure: If ``git rev-parse`` fails as well.
    """

    logger = logger or get_logger("shell_client.git")
    try:
        return client.background(describe(working_directory), trim=True)
    except ProcessFailure:
        logger.info("Warning: no tag found: Using commit.")
    return client.background(rev_parse(working_directory), trim=True)
