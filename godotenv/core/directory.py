"""
Directory locations used by GodotEnv.

Godot keeps export templates in a per-user data directory whose location
depends on the operating system:

    Windows: %APPDATA%\\Godot\\export_templates
    macOS:   ~/Library/Application Support/Godot/export_templates
    Linux:   $XDG_DATA_HOME/godot/export_templates (~/.local/share/godot)

GodotEnv's own settings live in ~/.godotenv (or %USERPROFILE%\\.godotenv).
"""

import os
from pathlib import Path

from godotenv.core.exceptions import ConfigurationError


def get_user_dir() -> Path:
    """
    Get the current user's home directory.

    Returns:
        Path: %USERPROFILE% on Windows, ~ elsewhere.
    """
    if os.name == "nt":  # Windows
        user_profile = os.environ.get("USERPROFILE")
        if user_profile:
            return Path(user_profile)
    return Path.home()


def get_app_data_dir() -> Path:
    """
    Get the Windows roaming application data directory.

    Returns:
        Path: %APPDATA%, or <user dir>/AppData/Roaming when unset.
    """
    app_data = os.environ.get("APPDATA")
    if app_data:
        return Path(app_data)
    return get_user_dir() / "AppData" / "Roaming"


def get_xdg_data_home() -> Path:
    """
    Get the XDG data directory used by Godot on Linux.

    Returns:
        Path: $XDG_DATA_HOME, or ~/.local/share when unset or relative.
    """
    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    if xdg_data_home and os.path.isabs(xdg_data_home):
        return Path(xdg_data_home)
    return get_user_dir() / ".local" / "share"


def get_godotenv_dir() -> Path:
    """
    Get the GodotEnv settings directory.

    Returns:
        Path: <user dir>/.godotenv

    Raises:
        ConfigurationError: If the home directory cannot be determined.
    """
    try:
        return get_user_dir() / ".godotenv"
    except RuntimeError as e:
        raise ConfigurationError(
            f"Cannot determine the GodotEnv settings directory: {e}"
        ) from e


__all__ = [
    "get_user_dir",
    "get_app_data_dir",
    "get_xdg_data_home",
    "get_godotenv_dir",
]
