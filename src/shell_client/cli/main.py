"""CLI entrypoints for shell-client."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from shell_client.app import (
    AppConfigError,
    build_command,
    create_client,
    describe_config,
    load_app_config,
    parse_environment,
    run_command,
)
from shell_client.errors import ProcessFailure, ProcessSignaled, ShellClientError
from shell_client.git import current_version
from shell_client.util.logging import configure_logging

app = typer.Typer(help="Run shell commands with configurable interpreters.")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (e.g., DEBUG, INFO, WARNING). Defaults to the config value.",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a configuration file or directory.",
    ),
) -> None:
    """Configure CLI-level options."""

    ctx.obj = {"config": config}
    try:
        level = log_level or load_app_config(config).log_level
    except AppConfigError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1) from exc
    configure_logging(level)


@app.command("run", context_settings={"ignore_unknown_options": True})
def run_command_cli(
    ctx: typer.Context,
    arguments: List[str] = typer.Argument(..., help="Command arguments."),
    background: bool = typer.Option(
        False,
        "--background",
        "-b",
        help="Capture output and print it once the command finishes.",
    ),
    interpreter: Optional[str] = typer.Option(
        None,
        "--interpreter",
        "-i",
        help="Interpreter: bash|csh|sh|tcsh|zsh|env|env:<shell>|/path/to/program",
    ),
    cwd: Optional[Path] = typer.Option(None, "--cwd", help="Working directory."),
    env: List[str] = typer.Option([], "--env", "-e", help="KEY=VALUE override."),
    trim: bool = typer.Option(False, "--trim", help="Strip surrounding whitespace."),
) -> None:
    """Run a command in the foreground or background."""

    try:
        config = load_app_config(ctx.obj["config"])
        command = build_command(
            arguments,
            config,
            interpreter=interpreter,
            working_directory=cwd,
            environment=parse_environment(env),
        )
        output = run_command(command, background=background, trim=trim)
    except ProcessSignaled as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=128 + exc.signal) from exc
    except ProcessFailure as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=exc.exit_code) from exc
    except (AppConfigError, ShellClientError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if output is not None:
        typer.echo(output, nl=not output.endswith("\n"))


@app.command("config")
def config_command(ctx: typer.Context) -> None:
    """Print the effective configuration as JSON."""

    try:
        config = load_app_config(ctx.obj["config"])
    except AppConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(describe_config(config))


@app.command("version")
def version_command(
    cwd: Optional[Path] = typer.Option(None, "--cwd", help="Repository directory."),
) -> None:
    """Print the current git tag, or the commit sha if HEAD is untagged."""

    try:
        version = current_version(create_client(), working_directory=cwd)
    except ShellClientError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(version)
