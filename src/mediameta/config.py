"""Configuration management for mediameta.

Supports loading configuration from:
1. Environment variables (MEDIAMETA_*)
2. Config file (~/.mediameta/config.yaml)
3. Default values

Example config file (~/.mediameta/config.yaml):
    mediainfo:
      binary: "/opt/mediainfo/bin/mediainfo"
"""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_MEDIAINFO_BIN = "mediainfo"

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".mediameta" / "config.yaml",
    Path.home() / ".config" / "mediameta" / "config.yaml",
    Path(".mediameta.yaml"),
]


@dataclass(frozen=True)
class MediaMetaConfig:
    """Main configuration for mediameta.

    Attributes:
        mediainfo_bin: Path or name of the mediainfo binary. A bare name
            is resolved through PATH when the process is spawned.
    """

    mediainfo_bin: str = DEFAULT_MEDIAINFO_BIN


def _read_yaml(config_path: Path) -> dict[str, Any] | None:
    """Read one YAML config file, warning (not failing) when it is unusable."""
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        warnings.warn(f"Ignoring config file {config_path}: {e}", stacklevel=3)
        return None
    if data is None:
        return {}
    if not isinstance(data, dict):
        warnings.warn(f"Ignoring config file {config_path}: not a mapping", stacklevel=3)
        return None
    return data


def _load_yaml_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML file if available."""
    locations = [Path(path)] if path is not None else CONFIG_LOCATIONS
    for config_path in locations:
        if config_path.exists():
            data = _read_yaml(config_path)
            if data is not None:
                return data
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with MEDIAMETA_ prefix."""
    return os.environ.get(f"MEDIAMETA_{key}", default)


def load_config(path: str | Path | None = None) -> MediaMetaConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (MEDIAMETA_*)
    2. Config file (``path`` if given, else the first of CONFIG_LOCATIONS)
    3. Default values
    """
    file_config = _load_yaml_config(path)

    mediainfo_config = file_config.get("mediainfo")
    if not isinstance(mediainfo_config, dict):
        mediainfo_config = {}
    binary = _get_env("MEDIAINFO_BIN") or mediainfo_config.get("binary")

    return MediaMetaConfig(mediainfo_bin=str(binary) if binary else DEFAULT_MEDIAINFO_BIN)
