"""
Platform detection for GodotEnv.

This module detects the current operating system and CPU architecture so the
matching Godot environment (Windows, macOS or Linux) can be selected and the
right release archives downloaded.

Usage:
    from godotenv.core.platform import detect_platform, OSType

    platform_info = detect_platform()
    if platform_info.os is OSType.LINUX:
        print(f"Linux on {platform_info.arch}")
"""

import functools
import platform
from dataclasses import dataclass
from enum import Enum


class OSType(Enum):
    """Operating systems GodotEnv knows about."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str) -> "OSType":
        """
        Look up an OS type by name ('windows', 'macos', 'linux').

        Unrecognized names map to UNKNOWN.
        """
        try:
            return cls(name.lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class PlatformInfo:
    """
    Platform information.

    Attributes:
        os: Operating system type
        arch: CPU architecture ('x64', 'arm64', 'x86', 'arm')
    """

    os: OSType
    arch: str

    def platform_string(self) -> str:
        """
        Get canonical platform string (e.g., 'linux-x64', 'macos-arm64').

        Example:
            >>> PlatformInfo(OSType.LINUX, "x64").platform_string()
            'linux-x64'
        """
        return f"{self.os.value}-{self.arch}"

    def __str__(self) -> str:
        return self.platform_string()


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current platform information.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformInfo instance with detected platform information
    """
    return PlatformInfo(os=detect_os(), arch=detect_architecture())


def detect_os() -> OSType:
    """
    Detect operating system.

    Returns:
        OSType for the running system, OSType.UNKNOWN if unsupported
    """
    system = platform.system().lower()

    if system == "windows":
        return OSType.WINDOWS
    elif system == "darwin":
        return OSType.MACOS
    elif system == "linux":
        return OSType.LINUX
    else:
        return OSType.UNKNOWN


def detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        Normalized architecture: 'x64', 'arm64', 'x86', 'arm'
    """
    machine = platform.machine().lower()

    # Normalize architecture names
    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("aarch64", "arm64"):
        return "arm64"
    elif machine in ("i386", "i686", "x86"):
        return "x86"
    elif machine.startswith("arm"):
        return "arm"
    else:
        # Return original for unknown architectures
        return machine


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to detect_platform() to re-detect.
    """
    detect_platform.cache_clear()


__all__ = [
    "OSType",
    "PlatformInfo",
    "detect_platform",
    "detect_os",
    "detect_architecture",
    "clear_platform_cache",
]
