"""
GodotEnv - Godot engine version and export template management.

This package computes where Godot releases and export templates are
downloaded from and installed to on Windows, macOS and Linux, and locates
the Godot executables inside an extracted installation.
"""

__version__ = "0.1.0"

from godotenv.core.version import GodotVersion, parse_version
from godotenv.environment import GodotEnvironment, create_environment

__all__ = [
    "__version__",
    "GodotVersion",
    "parse_version",
    "GodotEnvironment",
    "create_environment",
]
