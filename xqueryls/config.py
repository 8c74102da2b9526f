"""
Server configuration.

Settings come from an optional `.xqueryls.yml` in the workspace root and may
be overridden by the client's initializationOptions, which use the same keys:

    file_extensions: [xqy, xq]
    exclude_dirs: [node_modules, .git]
    provider_priority: 0
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILE_NAME = ".xqueryls.yml"

DEFAULT_EXCLUDE_DIRS = frozenset(
    {"venv", "node_modules", ".git", "__pycache__", "vendor"}
)


class ConfigError(Exception):
    """Raised when configuration cannot be read or has invalid values."""


@dataclass(frozen=True)
class ServerConfig:
    file_extensions: tuple[str, ...] = ("xqy",)
    exclude_dirs: frozenset[str] = field(default=DEFAULT_EXCLUDE_DIRS)
    provider_priority: int = 0

    def merged(self, data: Mapping[str, Any] | None) -> ServerConfig:
        """Return a copy with the known keys of `data` applied."""
        if not data:
            return self

        changes: dict[str, Any] = {}

        if "file_extensions" in data:
            extensions = _string_list(data, "file_extensions")
            changes["file_extensions"] = tuple(e.lstrip(".") for e in extensions)

        if "exclude_dirs" in data:
            changes["exclude_dirs"] = frozenset(_string_list(data, "exclude_dirs"))

        if "provider_priority" in data:
            priority = data["provider_priority"]
            if isinstance(priority, bool) or not isinstance(priority, int):
                raise ConfigError("provider_priority must be an integer")
            changes["provider_priority"] = priority

        return replace(self, **changes)


def _string_list(data: Mapping[str, Any], key: str) -> list[str]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key} must be a list of strings")
    return value


def load_config(
    workspace_root: Path | None,
    initialization_options: Mapping[str, Any] | None = None,
) -> ServerConfig:
    """
    Build the configuration for a workspace.

    Raises ConfigError if the config file is unreadable or malformed.
    """
    config = ServerConfig()

    if workspace_root is not None:
        config_file = workspace_root / CONFIG_FILE_NAME
        if config_file.is_file():
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Cannot read {config_file}: {e}") from e

            if data is not None and not isinstance(data, dict):
                raise ConfigError(f"{config_file} must contain a mapping")
            config = config.merged(data)

    return config.merged(initialization_options)
