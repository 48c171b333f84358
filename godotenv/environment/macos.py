"""
macOS Godot environment.

Godot for macOS is a universal application bundle (``Godot.app`` or
``Godot_mono.app``). Files inside a bundle rarely carry a meaningful
extension, so executables are recognized from their Mach-O mime type as
reported by ``file``.
"""

import logging
from pathlib import Path

from godotenv.core.directory import get_user_dir
from godotenv.core.exceptions import ShellError
from godotenv.core.platform import OSType
from godotenv.core.shell import Shell
from godotenv.core.version import GodotVersion
from godotenv.environment.base import GodotEnvironment

logger = logging.getLogger(__name__)

EXECUTABLE_MIME_TYPES = frozenset(
    {
        "application/x-mach-binary",
        "application/x-executable",
    }
)


class MacOSEnvironment(GodotEnvironment):
    """macOS environment (universal builds, Intel and Apple Silicon)."""

    os_type = OSType.MACOS
    display_name = "macOS"

    def _default_export_templates_base_path(self) -> Path:
        return get_user_dir() / "Library" / "Application Support" / "Godot"

    def get_installer_name_suffix(self, is_dotnet: bool, version: GodotVersion) -> str:
        """
        Examples:
            4.2   -> '_macos.universal'
            3.5   -> '_osx.universal'
            3.2.3 -> '_osx.64'
        """
        if version.major == "3":
            # Universal builds started with 3.3
            if version.minor.isdigit() and int(version.minor) < 3:
                name = "osx.64"
            else:
                name = "osx.universal"
        else:
            name = "macos.universal"
        return f"_mono_{name}" if is_dotnet else f"_{name}"

    @staticmethod
    def _app_bundle(is_dotnet: bool) -> str:
        return "Godot_mono.app" if is_dotnet else "Godot.app"

    def get_relative_extracted_executable_path(
        self, version: GodotVersion, is_dotnet: bool
    ) -> Path:
        return Path(self._app_bundle(is_dotnet), "Contents", "MacOS", "Godot")

    def get_relative_godot_sharp_debug_path(self, version: GodotVersion) -> Path:
        return Path(
            self._app_bundle(True), "Contents", "Resources", "GodotSharp", "Api", "Debug"
        )

    def get_relative_godot_sharp_release_path(self, version: GodotVersion) -> Path:
        return Path(
            self._app_bundle(True), "Contents", "Resources", "GodotSharp", "Api", "Release"
        )

    def is_executable(self, shell: Shell, file: Path) -> bool:
        try:
            result = shell.run("file", "--mime-type", "-b", str(file))
        except ShellError as e:
            logger.debug(f"Could not inspect {file}: {e}")
            return False
        return result.succeeded and result.stdout.strip() in EXECUTABLE_MIME_TYPES
