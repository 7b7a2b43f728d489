"""Configuration loading from pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gitmoji_release.config.models import GitmojiReleaseConfig
from gitmoji_release.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError

TOOL_KEY = "gitmoji-release"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in start or any parent directory.

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the filesystem root
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Config file not found: {path}")
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def extract_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the [tool.gitmoji-release] table, or an empty dict."""
    return dict(pyproject.get("tool", {}).get(TOOL_KEY, {}))


def load_config(path: Path | None = None) -> GitmojiReleaseConfig:
    """Load configuration for the project at path.

    Falls back to defaults when there is no pyproject.toml or it has no
    [tool.gitmoji-release] section.

    Raises:
        ConfigValidationError: If configured values are invalid
    """
    try:
        pyproject_path = find_pyproject_toml(path)
    except ConfigNotFoundError:
        return GitmojiReleaseConfig()

    data = extract_config(load_pyproject_toml(pyproject_path))
    try:
        return GitmojiReleaseConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration in {pyproject_path}:\n{e}") from e
