"""GodotEnv settings."""

from .settings import (
    GodotEnvSettings,
    SearchSettings,
    load_settings,
    parse_settings,
    get_default_settings_path,
)

__all__ = [
    "GodotEnvSettings",
    "SearchSettings",
    "load_settings",
    "parse_settings",
    "get_default_settings_path",
]
