"""Windows Godot environment."""

from pathlib import Path

from godotenv.core.directory import get_app_data_dir
from godotenv.core.platform import OSType
from godotenv.core.shell import Shell
from godotenv.core.version import GodotVersion
from godotenv.environment.base import GodotEnvironment

EXECUTABLE_EXTENSIONS = frozenset({".exe"})

# Architecture -> platform token used in release names
ARCH_TOKENS = {
    "x64": "win64",
    "x86": "win32",
    "arm64": "windows_arm64",
}


class WindowsEnvironment(GodotEnvironment):
    """
    Windows releases ship as ``Godot_v4.2-stable_win64.exe.zip`` (a single
    executable) or ``Godot_v4.2-stable_mono_win64.zip`` (a folder holding the
    executable and GodotSharp).
    """

    os_type = OSType.WINDOWS
    display_name = "Windows"

    def _default_export_templates_base_path(self) -> Path:
        return get_app_data_dir() / "Godot"

    def _arch_token(self, version: GodotVersion) -> str:
        # Godot 3 only published 32 and 64 bit x86 builds.
        if self.arch == "arm64" and version.major != "3":
            return ARCH_TOKENS["arm64"]
        if self.arch == "x86":
            return ARCH_TOKENS["x86"]
        return ARCH_TOKENS["x64"]

    def get_installer_name_suffix(self, is_dotnet: bool, version: GodotVersion) -> str:
        token = self._arch_token(version)
        return f"_mono_{token}" if is_dotnet else f"_{token}.exe"

    def _dotnet_folder(self, version: GodotVersion) -> str:
        return self.get_filename_version_string(version) + self.get_installer_name_suffix(
            True, version
        )

    def get_relative_extracted_executable_path(
        self, version: GodotVersion, is_dotnet: bool
    ) -> Path:
        if not is_dotnet:
            return Path(
                self.get_filename_version_string(version)
                + self.get_installer_name_suffix(False, version)
            )
        folder = self._dotnet_folder(version)
        return Path(folder, folder + ".exe")

    def get_relative_godot_sharp_debug_path(self, version: GodotVersion) -> Path:
        return Path(self._dotnet_folder(version), "GodotSharp", "Api", "Debug")

    def get_relative_godot_sharp_release_path(self, version: GodotVersion) -> Path:
        return Path(self._dotnet_folder(version), "GodotSharp", "Api", "Release")

    def is_executable(self, shell: Shell, file: Path) -> bool:
        return file.suffix.lower() in EXECUTABLE_EXTENSIONS
