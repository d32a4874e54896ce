"""Configuration models and loaders for shell-client."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from shell_client.command import Command, Interpreter

CONFIG_FILE_NAMES: tuple[str, ...] = ("shell_client.yaml", "shell_client.yml", "pyproject.toml")


@dataclass(frozen=True)
class ClientConfig:
    """Defaults applied to commands built by the application.

    Attributes:
        interpreter: Interpreter name or path (see ``Interpreter.parse``).
        use_dash_c: Optional override of the interpreter's ``-c`` flag.
        environment: Environment overrides added to every command.
        working_directory: Default working directory for commands.
        log_level: Logging level name.
    """

    interpreter: str = "env"
    use_dash_c: bool | None = None
    environment: dict[str, str] = field(default_factory=dict)
    working_directory: Path | None = None
    log_level: str = "INFO"

    def default_interpreter(self) -> Interpreter:
        return Interpreter.parse(self.interpreter, self.use_dash_c)

    def command(self, *arguments: Any) -> Command:
        """Build a command carrying the configured defaults."""

        return Command(
            *arguments,
            interpreter=self.default_interpreter(),
            environment=dict(self.environment) or None,
            working_directory=self.working_directory,
        )


def load_config(path: Path | None = None) -> ClientConfig:
    """Load client configuration from disk.

    Args:
        path: Optional path to a configuration file or directory.

    Returns:
        Parsed ClientConfig with defaults applied when no config exists.
    """

    config_path = _resolve_config_path(path)
    if config_path is None:
        return ClientConfig()

    if config_path.suffix in {".yaml", ".yml"}:
        raw_data = _load_yaml(config_path)
    elif config_path.suffix == ".toml":
        raw_data = _load_toml(config_path)
    else:
        raise ValueError(f"Unsupported config file type: {config_path}")

    return _parse_client_config(raw_data, base_path=config_path.parent)


def config_to_dict(config: ClientConfig) -> dict[str, Any]:
    """Serialize a ClientConfig into a JSON-compatible dictionary."""

    return {
        "interpreter": config.interpreter,
        "use_dash_c": config.use_dash_c,
        "environment": dict(config.environment),
        "working_directory": (
            str(config.working_directory) if config.working_directory is not None else None
        ),
        "log_level": config.log_level,
    }


def update_interpreter(config: ClientConfig, interpreter: str) -> ClientConfig:
    """Return a config copy with a different default interpreter."""

    Interpreter.parse(interpreter)
    return replace(config, interpreter=interpreter, use_dash_c=None)


def _resolve_config_path(path: Path | None) -> Path | None:
    if path is None:
        candidate_paths = [Path(name) for name in CONFIG_FILE_NAMES]
    elif path.is_dir():
        candidate_paths = [path / name for name in CONFIG_FILE_NAMES]
    else:
        candidate_paths = [path]

    for candidate in candidate_paths:
        if candidate.exists():
            return candidate
    return None


def _load_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        data = tomllib.load(handle)
    if path.name == "pyproject.toml":
        tool_config = data.get("tool", {}).get("shell_client", {})
        if not isinstance(tool_config, dict):
            raise ValueError("tool.shell_client must be a mapping.")
        return tool_config
    return data


def _load_yaml(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None
    if data is not None:
        if not isinstance(data, dict):
            raise ValueError("YAML configuration must be a mapping.")
        return data

    parsed = yaml.safe_load(text)
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError("YAML configuration must be a mapping.")
    return parsed


def _parse_client_config(raw_data: dict[str, Any], base_path: Path) -> ClientConfig:
    interpreter = str(raw_data.get("interpreter", "env")).strip()
    use_dash_c = raw_data.get("use_dash_c")
    if use_dash_c is not None and not isinstance(use_dash_c, bool):
        raise ValueError("use_dash_c must be a boolean.")
    try:
        Interpreter.parse(interpreter, use_dash_c)
    except ValueError as exc:
        raise ValueError(f"Invalid interpreter in {base_path}: {exc}") from exc

    environment = raw_data.get("environment", {})
    if not isinstance(environment, dict):
        raise ValueError("environment must be a mapping of variable names to values.")

    working_directory = _optional_path(raw_data.get("working_directory"), base_path)

    return ClientConfig(
        interpreter=interpreter,
        use_dash_c=use_dash_c,
        environment={str(key): str(value) for key, value in environment.items()},
        working_directory=working_directory,
        log_level=str(raw_data.get("log_level", "INFO")),
    )


def _optional_path(value: Any, base_path: Path) -> Path | None:
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    path = Path(text)
    if not path.is_absolute():
        path = (base_path / path).resolve()
    return path
