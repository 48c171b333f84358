"""
Linux Godot environment.

Release names changed with Godot 4:

    Godot 3: Godot_v3.5-stable_x11.64.zip        Godot_v3.5-stable_mono_x11_64.zip
    Godot 4: Godot_v4.2-stable_linux.x86_64.zip  Godot_v4.2-stable_mono_linux_x86_64.zip

.NET archives contain a folder named after the archive, which holds the
executable (``Godot_v4.2-stable_mono_linux.x86_64``) and GodotSharp.
"""

import stat
from pathlib import Path

from godotenv.core.directory import get_xdg_data_home
from godotenv.core.platform import OSType
from godotenv.core.shell import Shell
from godotenv.core.version import GodotVersion
from godotenv.environment.base import GodotEnvironment

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

GODOT3_PLATFORMS = {
    "x64": "x11.64",
    "x86": "x11.32",
}

GODOT4_PLATFORMS = {
    "x64": "linux.x86_64",
    "x86": "linux.x86_32",
    "arm64": "linux.arm64",
    "arm": "linux.arm32",
}


class LinuxEnvironment(GodotEnvironment):
    """Linux environment."""

    os_type = OSType.LINUX
    display_name = "Linux"

    def _default_export_templates_base_path(self) -> Path:
        return get_xdg_data_home() / "godot"

    def _platform_name(self, version: GodotVersion) -> str:
        platforms = GODOT3_PLATFORMS if version.major == "3" else GODOT4_PLATFORMS
        return platforms.get(self.arch, platforms["x64"])

    def get_installer_name_suffix(self, is_dotnet: bool, version: GodotVersion) -> str:
        name = self._platform_name(version)
        if is_dotnet:
            return "_mono_" + name.replace(".", "_")
        return f"_{name}"

    def _dotnet_folder(self, version: GodotVersion) -> str:
        return self.get_filename_version_string(version) + self.get_installer_name_suffix(
            True, version
        )

    def get_relative_extracted_executable_path(
        self, version: GodotVersion, is_dotnet: bool
    ) -> Path:
        filename = self.get_filename_version_string(version)
        name = self._platform_name(version)
        if not is_dotnet:
            return Path(f"{filename}_{name}")
        return Path(self._dotnet_folder(version), f"{filename}_mono_{name}")

    def get_relative_godot_sharp_debug_path(self, version: GodotVersion) -> Path:
        return Path(self._dotnet_folder(version), "GodotSharp", "Api", "Debug")

    def get_relative_godot_sharp_release_path(self, version: GodotVersion) -> Path:
        return Path(self._dotnet_folder(version), "GodotSharp", "Api", "Release")

    def is_executable(self, shell: Shell, file: Path) -> bool:
        mode = file.stat().st_mode
        return stat.S_ISREG(mode) and bool(mode & EXECUTE_BITS)
