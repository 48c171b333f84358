"""
Operating-system specific Godot environments.

Use create_environment() to get the environment for the running OS.
"""

from .base import (
    GodotEnvironment,
    create_environment,
    GODOT_FILENAME_PREFIX,
    GODOT_URL_PREFIX,
    GODOT_SHARP_DLL,
)
from .linux import LinuxEnvironment
from .macos import MacOSEnvironment
from .windows import WindowsEnvironment
from .reporting import SearchLog, LoggingSearchLog

__all__ = [
    "GodotEnvironment",
    "create_environment",
    "LinuxEnvironment",
    "MacOSEnvironment",
    "WindowsEnvironment",
    "SearchLog",
    "LoggingSearchLog",
    "GODOT_FILENAME_PREFIX",
    "GODOT_URL_PREFIX",
    "GODOT_SHARP_DLL",
]
