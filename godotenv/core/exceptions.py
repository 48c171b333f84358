"""
Centralized exception hierarchy for GodotEnv.

This module defines all custom exceptions used across the codebase
to provide clear exception semantics.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class GodotEnvError(Exception):
    """Base exception for all GodotEnv errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(GodotEnvError):
    """Base exception for configuration errors that stop an installation."""

    pass


class UnsupportedPlatformError(ConfigurationError):
    """Raised when no Godot environment exists for the operating system."""

    def __init__(self, os_name: str = "unknown"):
        self.os_name = os_name
        super().__init__(
            f"Cannot create a platform for an unknown operating system: {os_name}"
        )


class ConfigError(ConfigurationError):
    """Settings file parsing or validation error."""

    pass


# ============================================================================
# Version Exceptions
# ============================================================================


class InvalidVersionError(GodotEnvError):
    """Invalid Godot version string."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid Godot version: {text!r}")


# ============================================================================
# Filesystem Exceptions
# ============================================================================


class FilesystemError(GodotEnvError):
    """Base exception for filesystem operations."""

    pass


class ExecutableSearchError(FilesystemError):
    """Raised when a directory cannot be read during an executable search."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        msg = f"Failed to search for executables in {path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


# ============================================================================
# Shell Exceptions
# ============================================================================


class ShellError(GodotEnvError):
    """Raised when a shell command cannot be started or times out."""

    pass
