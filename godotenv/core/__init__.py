"""
Core functionality for GodotEnv.

This package contains the foundational modules that other components depend on.
"""

from .platform import (
    OSType,
    PlatformInfo,
    detect_platform,
    detect_os,
    detect_architecture,
    clear_platform_cache,
)

from .version import GodotVersion, parse_version

from .exceptions import (
    GodotEnvError,
    ConfigurationError,
    UnsupportedPlatformError,
    ConfigError,
    InvalidVersionError,
    FilesystemError,
    ExecutableSearchError,
    ShellError,
)

__all__ = [
    "OSType",
    "PlatformInfo",
    "detect_platform",
    "detect_os",
    "detect_architecture",
    "clear_platform_cache",
    "GodotVersion",
    "parse_version",
    "GodotEnvError",
    "ConfigurationError",
    "UnsupportedPlatformError",
    "ConfigError",
    "InvalidVersionError",
    "FilesystemError",
    "ExecutableSearchError",
    "ShellError",
]
