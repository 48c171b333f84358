"""
Tests for the macOS Godot environment.
"""

from pathlib import Path
from unittest.mock import Mock

import pytest

from godotenv.core.exceptions import ShellError
from godotenv.core.platform import OSType, PlatformInfo
from godotenv.core.shell import ProcessResult
from godotenv.core.version import GodotVersion
from godotenv.environment import MacOSEnvironment


def macos() -> MacOSEnvironment:
    return MacOSEnvironment(platform_info=PlatformInfo(OSType.MACOS, "arm64"))


class TestInstallerNameSuffix:
    @pytest.mark.parametrize(
        "version,is_dotnet,expected",
        [
            (GodotVersion("4", "2"), False, "_macos.universal"),
            (GodotVersion("4", "2"), True, "_mono_macos.universal"),
            (GodotVersion("3", "5", "2"), False, "_osx.universal"),
            (GodotVersion("3", "5", "2"), True, "_mono_osx.universal"),
            (GodotVersion("3", "3"), False, "_osx.universal"),
            (GodotVersion("3", "2", "3"), False, "_osx.64"),
            (GodotVersion("3", "2", "3"), True, "_mono_osx.64"),
        ],
    )
    def test_suffix(self, version, is_dotnet, expected):
        assert macos().get_installer_name_suffix(is_dotnet, version) == expected


class TestRelativePaths:
    def test_executable(self):
        assert macos().get_relative_extracted_executable_path(
            GodotVersion("4", "2"), False
        ) == Path("Godot.app", "Contents", "MacOS", "Godot")

    def test_dotnet_executable(self):
        assert macos().get_relative_extracted_executable_path(
            GodotVersion("4", "2"), True
        ) == Path("Godot_mono.app", "Contents", "MacOS", "Godot")

    def test_godot_sharp_paths(self):
        env = macos()
        api = Path("Godot_mono.app", "Contents", "Resources", "GodotSharp", "Api")
        version = GodotVersion("4", "2")
        assert env.get_relative_godot_sharp_debug_path(version) == api / "Debug"
        assert env.get_relative_godot_sharp_release_path(version) == api / "Release"


class TestExportTemplatesBase:
    def test_application_support(self, isolated_home):
        assert macos().export_templates_base_path == (
            isolated_home / "Library" / "Application Support" / "Godot"
        )


class TestIsExecutable:
    def test_mach_binary(self):
        shell = Mock()
        shell.run.return_value = ProcessResult(0, "application/x-mach-binary\n", "")

        assert macos().is_executable(shell, Path("/tmp/Godot")) is True
        shell.run.assert_called_once_with("file", "--mime-type", "-b", str(Path("/tmp/Godot")))

    def test_other_mime_type(self):
        shell = Mock()
        shell.run.return_value = ProcessResult(0, "text/xml\n", "")
        assert macos().is_executable(shell, Path("Info.plist")) is False

    def test_failed_file_command(self):
        shell = Mock()
        shell.run.return_value = ProcessResult(1, "", "cannot open")
        assert macos().is_executable(shell, Path("Godot")) is False

    def test_file_command_cannot_run(self):
        shell = Mock()
        shell.run.side_effect = ShellError("Command not found: file")
        assert macos().is_executable(shell, Path("Godot")) is False
