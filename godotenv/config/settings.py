"""YAML settings for GodotEnv.

This module loads the optional user settings file (``~/.godotenv/settings.yaml``
by default, or the path in ``GODOTENV_SETTINGS``):

    download_url_prefix: https://downloads.tuxfamily.org/godotengine/
    export_templates_dir: /custom/godot/data
    search:
      max_workers: 4
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from godotenv.core.directory import get_godotenv_dir
from godotenv.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "GODOTENV_SETTINGS"
SETTINGS_FILENAME = "settings.yaml"

DEFAULT_DOWNLOAD_URL_PREFIX = "https://downloads.tuxfamily.org/godotengine/"


@dataclass
class SearchSettings:
    """Executable search settings."""

    max_workers: Optional[int] = None  # None: ThreadPoolExecutor default


@dataclass
class GodotEnvSettings:
    """GodotEnv user settings."""

    download_url_prefix: str = DEFAULT_DOWNLOAD_URL_PREFIX
    export_templates_dir: Optional[Path] = None  # None: OS default
    search: SearchSettings = field(default_factory=SearchSettings)


def get_default_settings_path() -> Path:
    """Get the settings file path, honoring GODOTENV_SETTINGS."""
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override)
    return get_godotenv_dir() / SETTINGS_FILENAME


def load_settings(path: Optional[Path] = None) -> GodotEnvSettings:
    """
    Load settings from a YAML file.

    Args:
        path: Settings file. If None, uses get_default_settings_path().

    Returns:
        GodotEnvSettings (defaults when the file does not exist)

    Raises:
        ConfigError: If the file is not valid YAML or has invalid values
    """
    path = Path(path) if path is not None else get_default_settings_path()

    if not path.exists():
        logger.debug(f"Settings file not found (optional): {path}")
        return GodotEnvSettings()

    logger.debug(f"Loading settings from {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read settings file {path}: {e}") from e

    return parse_settings(data or {}, source=path)


def parse_settings(data: Dict[str, Any], source: Any = "<dict>") -> GodotEnvSettings:
    """
    Build settings from a parsed YAML mapping.

    Raises:
        ConfigError: If a value has the wrong type
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Settings in {source} must be a mapping")

    settings = GodotEnvSettings()

    prefix = data.get("download_url_prefix")
    if prefix is not None:
        if not isinstance(prefix, str) or not prefix:
            raise ConfigError(
                f"download_url_prefix in {source} must be a non-empty string"
            )
        # URL segments are appended directly after the prefix
        settings.download_url_prefix = prefix if prefix.endswith("/") else prefix + "/"

    templates_dir = data.get("export_templates_dir")
    if templates_dir is not None:
        if not isinstance(templates_dir, str):
            raise ConfigError(f"export_templates_dir in {source} must be a path")
        settings.export_templates_dir = Path(templates_dir).expanduser()

    search = data.get("search") or {}
    if not isinstance(search, dict):
        raise ConfigError(f"search in {source} must be a mapping")
    max_workers = search.get("max_workers")
    if max_workers is not None:
        if isinstance(max_workers, bool) or not isinstance(max_workers, int):
            raise ConfigError(f"search.max_workers in {source} must be an integer")
        if max_workers < 1:
            raise ConfigError(f"search.max_workers in {source} must be at least 1")
        settings.search.max_workers = max_workers

    return settings


__all__ = [
    "GodotEnvSettings",
    "SearchSettings",
    "load_settings",
    "parse_settings",
    "get_default_settings_path",
    "DEFAULT_DOWNLOAD_URL_PREFIX",
    "SETTINGS_ENV_VAR",
]
