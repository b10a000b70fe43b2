"""Configuration management for ultralist.

Settings are read from a YAML file at ``$ULTRALIST_CONFIG`` or
``~/.config/ultralist/config.yaml``. A missing file means defaults.

Example::

    todos_file: ~/.todos.json
    group_by: context
    print_notes: true
    colors:
      project: green
      overdue: bright_red
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ultralist.grouping import GROUP_BY_CHOICES
from ultralist.printers.styles import Palette
from ultralist.store import DEFAULT_TODOS_FILE

_logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.config/ultralist/config.yaml")


class ConfigError(Exception):
    """Raised when the config file cannot be read or has invalid values."""


@dataclass
class Config:
    """ultralist configuration."""

    todos_file: Path = Path(DEFAULT_TODOS_FILE)
    group_by: str = "project"  # project, context, none
    print_notes: bool = False
    colors: dict[str, str] = field(default_factory=dict)  # role -> color

    @property
    def palette(self) -> Palette:
        return Palette.from_colors(self.colors)


def expand_path(path: str | Path) -> Path:
    """Expand ~ and environment variables in a path."""
    return Path(os.path.expandvars(str(path))).expanduser()


def get_config_path() -> Path:
    """Get the path to the config file."""
    env_path = os.environ.get("ULTRALIST_CONFIG")
    if env_path:
        return expand_path(env_path)
    return expand_path(DEFAULT_CONFIG_PATH)


def _parse_colors(data: Any) -> dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("'colors' must be a mapping of role to color")
    colors = {str(k): str(v) for k, v in data.items()}
    try:
        Palette.from_colors(colors)
    except ValueError as e:
        raise ConfigError(str(e)) from e
    return colors


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from a YAML file, falling back to defaults.

    Raises:
        ConfigError: If the file is not valid YAML or holds invalid values.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        _logger.debug("No config at %s, using defaults", config_path)
        return Config()

    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not load config {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must be a YAML mapping")

    group_by = data.get("group_by", "project")
    if group_by not in GROUP_BY_CHOICES:
        raise ConfigError(
            f"Invalid group_by '{group_by}'. Valid: {', '.join(GROUP_BY_CHOICES)}"
        )

    print_notes = data.get("print_notes", False)
    if not isinstance(print_notes, bool):
        raise ConfigError(
            f"Invalid print_notes '{print_notes}'. Expected true or false"
        )

    return Config(
        todos_file=expand_path(data.get("todos_file", DEFAULT_TODOS_FILE)),
        group_by=group_by,
        print_notes=print_notes,
        colors=_parse_colors(data.get("colors")),
    )


# Singleton config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Loads config on first call, returns cached instance thereafter.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the cached configuration (useful for testing)."""
    global _config
    _config = None
