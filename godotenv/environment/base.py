"""
Godot environment abstraction.

A GodotEnvironment knows how Godot releases are named, where they are
downloaded from and where their export templates are installed on one
operating system. The shared naming rules live here; each operating system
supplies its own constants and executable check in a subclass:

    - WindowsEnvironment  (godotenv.environment.windows)
    - MacOSEnvironment    (godotenv.environment.macos)
    - LinuxEnvironment    (godotenv.environment.linux)

The naming rules mirror the artifacts published by the Godot project, e.g.

    https://downloads.tuxfamily.org/godotengine/4.2.1/rc1/mono/
        Godot_v4.2.1-rc1_mono_linux_x86_64.zip

Usage:
    from godotenv.environment import create_environment
    from godotenv.core.version import parse_version

    env = create_environment()
    version = parse_version("4.2")
    print(env.get_download_url(version, is_dotnet=False, is_template=True))
    print(env.get_export_templates_local_path(version, is_dotnet=False))
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Iterable, List, Optional, Union

from godotenv.config.settings import DEFAULT_DOWNLOAD_URL_PREFIX, GodotEnvSettings
from godotenv.core.exceptions import ExecutableSearchError, UnsupportedPlatformError
from godotenv.core.filesystem import combine, get_full_path, search_recursively
from godotenv.core.platform import OSType, PlatformInfo, detect_platform
from godotenv.core.shell import Shell, ShellFactory
from godotenv.core.version import GodotVersion
from godotenv.environment.reporting import LoggingSearchLog, SearchLog

logger = logging.getLogger(__name__)

GODOT_FILENAME_PREFIX = "Godot_v"
GODOT_URL_PREFIX = DEFAULT_DOWNLOAD_URL_PREFIX

# Always reported as executable: the exec bit and file headers say nothing
# useful about a .NET assembly.
GODOT_SHARP_DLL = "GodotSharp.dll"
LOCALIZATION_BUNDLE_SUFFIX = ".lproj"

EXPORT_TEMPLATES_DIRNAME = "export_templates"
EXPORT_TEMPLATES_EXTENSION = ".tpz"


def _version_prefix(version: GodotVersion) -> str:
    """'major.minor[.patch]' as used by download folders and template folders."""
    text = version.major
    if version.minor:
        text += f".{version.minor}"
    if version.has_patch:
        text += f".{version.patch}"
    return text


class GodotEnvironment(ABC):
    """
    Operating-system specific knowledge about Godot installations.

    Instances are read-only after construction and safe to share.

    Attributes:
        os_type: Operating system this environment implements
        display_name: Human readable OS name
    """

    os_type: ClassVar[OSType]
    display_name: ClassVar[str]

    def __init__(
        self,
        platform_info: Optional[PlatformInfo] = None,
        shell_factory: ShellFactory = Shell,
        settings: Optional[GodotEnvSettings] = None,
    ):
        """
        Initialize the environment.

        Args:
            platform_info: Platform to target. If None, uses the OS type of
                this class and the detected architecture.
            shell_factory: Creates the Shell handed to is_executable()
            settings: User settings. If None, uses defaults.
        """
        if platform_info is None:
            platform_info = PlatformInfo(self.os_type, detect_platform().arch)
        settings = settings or GodotEnvSettings()

        self._platform_info = platform_info
        self._shell_factory = shell_factory
        self._url_prefix = settings.download_url_prefix
        self._max_workers = settings.search.max_workers
        self._export_templates_base_path = get_full_path(
            settings.export_templates_dir or self._default_export_templates_base_path()
        )

    @staticmethod
    def create(
        os_type: Optional[OSType] = None,
        platform_info: Optional[PlatformInfo] = None,
        shell_factory: ShellFactory = Shell,
        settings: Optional[GodotEnvSettings] = None,
    ) -> "GodotEnvironment":
        """Create the environment for an OS (see create_environment)."""
        return create_environment(
            os_type=os_type,
            platform_info=platform_info,
            shell_factory=shell_factory,
            settings=settings,
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def platform_info(self) -> PlatformInfo:
        return self._platform_info

    @property
    def arch(self) -> str:
        return self._platform_info.arch

    @property
    def url_prefix(self) -> str:
        return self._url_prefix

    @property
    def export_templates_base_path(self) -> Path:
        """Base directory containing Godot's export_templates folder."""
        return self._export_templates_base_path

    # ------------------------------------------------------------------
    # Operating-system specific capabilities
    # ------------------------------------------------------------------

    @abstractmethod
    def _default_export_templates_base_path(self) -> Path:
        """Godot's per-user data directory on this OS."""

    @abstractmethod
    def get_installer_name_suffix(
        self, is_dotnet: bool, version: GodotVersion
    ) -> str:
        """
        Godot installation filename suffix (e.g. '_win64.exe').

        Args:
            is_dotnet: True for the .NET-enabled build of Godot
            version: Godot version (the naming scheme changed in Godot 4)
        """

    @abstractmethod
    def get_relative_extracted_executable_path(
        self, version: GodotVersion, is_dotnet: bool
    ) -> Path:
        """Path of the Godot executable relative to the extracted archive."""

    @abstractmethod
    def get_relative_godot_sharp_debug_path(self, version: GodotVersion) -> Path:
        """Path of the GodotSharp Debug directory in a .NET installation."""

    @abstractmethod
    def get_relative_godot_sharp_release_path(self, version: GodotVersion) -> Path:
        """Path of the GodotSharp Release directory in a .NET installation."""

    @abstractmethod
    def is_executable(self, shell: Shell, file: Path) -> bool:
        """
        Should return True if the given file is likely to be executable.

        May run a process through ``shell``; called from worker threads.
        """

    def describe(self, log: Optional[SearchLog] = None) -> None:
        """Output a description of the platform to the log."""
        log = log or LoggingSearchLog(logger)
        log.info(f"Running on {self.display_name} ({self.arch})")
        log.info(f"Export templates: {self.export_templates_base_path}")

    # ------------------------------------------------------------------
    # Shared naming rules
    # ------------------------------------------------------------------

    def has_environment_properties_set(self, exec_directory_paths: Iterable[str]) -> bool:
        """
        True if the environment variables point at the given Godot
        executable directories.
        """
        # TODO: compare against PATH / GODOT once the installer manages them.
        return True

    @staticmethod
    def get_filename_version_string(version: GodotVersion) -> str:
        """
        Version part of Godot release filenames.

        Example:
            >>> GodotEnvironment.get_filename_version_string(parse_version("4.2.1-rc.1"))
            'Godot_v4.2.1-rc1'
        """
        filename = GODOT_FILENAME_PREFIX + _version_prefix(version)
        if version.label:
            filename += f"-{version.label_no_dots}"
        else:
            filename += "-stable"
        return filename

    def get_installer_filename(self, version: GodotVersion, is_dotnet: bool) -> str:
        """Filename of the Godot application archive for this platform."""
        return (
            self.get_filename_version_string(version)
            + self.get_installer_name_suffix(is_dotnet, version)
            + ".zip"
        )

    @staticmethod
    def get_export_templates_installer_filename(
        version: GodotVersion, is_dotnet: bool
    ) -> str:
        """Filename of the export templates archive (same on every platform)."""
        return (
            GodotEnvironment.get_filename_version_string(version)
            + ("_mono" if is_dotnet else "")
            + "_export_templates"
            + EXPORT_TEMPLATES_EXTENSION
        )

    def get_export_templates_local_path(
        self, version: GodotVersion, is_dotnet: bool
    ) -> Path:
        """
        Compute where the export templates for a version are installed.

        Args:
            version: Godot version
            is_dotnet: True if referencing the .NET version of Godot

        Returns:
            Absolute path, e.g. ~/.local/share/godot/export_templates/4.2.stable
        """
        folder_name = _version_prefix(version)
        if version.label:
            folder_name += f".{version.label}"
        else:
            folder_name += ".stable"
        if is_dotnet:
            folder_name += ".mono"

        return get_full_path(
            combine(self.export_templates_base_path, EXPORT_TEMPLATES_DIRNAME, folder_name)
        )

    def get_download_url(
        self, version: GodotVersion, is_dotnet: bool, is_template: bool
    ) -> str:
        """
        Compute the Godot download URL.

        Args:
            version: Godot version
            is_dotnet: True if referencing the .NET version of Godot
            is_template: True for the export templates archive, False for
                the Godot application

        Returns:
            Download URL
        """
        url = self.url_prefix + _version_prefix(version) + "/"
        if version.label:
            url += f"{version.label_no_dots}/"
        if is_dotnet:
            url += "mono/"

        if is_template:
            url += self.get_export_templates_installer_filename(version, is_dotnet)
        else:
            url += self.get_installer_filename(version, is_dotnet)

        logger.debug(f"Download URL for Godot {version}: {url}")
        return url

    # ------------------------------------------------------------------
    # Executable search
    # ------------------------------------------------------------------

    @staticmethod
    def should_search_directory(directory: Path) -> bool:
        """False for debug builds and macOS localization bundles."""
        name = directory.name.lower()
        return "debug" not in name and not name.endswith(LOCALIZATION_BUNDLE_SUFFIX)

    def find_executables_recursively(
        self,
        directory: Union[str, Path],
        log: Optional[SearchLog] = None,
        max_workers: Optional[int] = None,
    ) -> List[Path]:
        """
        Recursively search for the executable files in a directory.

        Directories whose name contains 'debug' (any case) or ends with
        '.lproj' are skipped together with everything beneath them.

        Args:
            directory: Directory to search
            log: Receives the directories entered and executables found.
                If None, messages go to the logging module.
            max_workers: Concurrent executable checks. If None, uses settings.

        Returns:
            Executable files in traversal order (possibly empty)

        Raises:
            ExecutableSearchError: If any directory cannot be read
        """
        directory = Path(directory)
        log = log or LoggingSearchLog(logger)
        shell = self._shell_factory(directory)

        def select(file: Path) -> bool:
            try:
                return file.name == GODOT_SHARP_DLL or self.is_executable(shell, file)
            except OSError as e:
                raise ExecutableSearchError(file, e.strerror or str(e)) from e

        log.info(f"Searching for executables in {directory}...")
        exec_files = search_recursively(
            directory,
            selector=select,
            dir_selector=self.should_search_directory,
            on_directory=lambda d, indent: log.info(f"{indent}{d.name}/"),
            on_match=lambda f, indent: log.info(f"{indent}{f.name}"),
            max_workers=max_workers or self._max_workers,
        )

        if exec_files:
            log.success(f"Found {len(exec_files)} executable files.")
        else:
            log.warn("No executable files found!")

        return exec_files

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.platform_info})"


def create_environment(
    os_type: Optional[OSType] = None,
    platform_info: Optional[PlatformInfo] = None,
    shell_factory: ShellFactory = Shell,
    settings: Optional[GodotEnvSettings] = None,
) -> GodotEnvironment:
    """
    Create the Godot environment for an operating system.

    Args:
        os_type: OS to create the environment for. If None, uses
            platform_info.os, or the detected OS.
        platform_info: Platform (OS and architecture) to target
        shell_factory: Creates shells for executable checks
        settings: User settings

    Returns:
        WindowsEnvironment, MacOSEnvironment or LinuxEnvironment

    Raises:
        UnsupportedPlatformError: If the OS is not Windows, macOS or Linux
    """
    # Imported here: the variants subclass GodotEnvironment.
    from godotenv.environment.linux import LinuxEnvironment
    from godotenv.environment.macos import MacOSEnvironment
    from godotenv.environment.windows import WindowsEnvironment

    if os_type is None:
        os_type = platform_info.os if platform_info else detect_platform().os
    if platform_info is not None and platform_info.os is not os_type:
        platform_info = PlatformInfo(os_type, platform_info.arch)

    environments = {
        OSType.WINDOWS: WindowsEnvironment,
        OSType.MACOS: MacOSEnvironment,
        OSType.LINUX: LinuxEnvironment,
    }
    environment_class = environments.get(os_type)
    if environment_class is None:
        raise UnsupportedPlatformError(os_type.value)

    return environment_class(
        platform_info=platform_info, shell_factory=shell_factory, settings=settings
    )


__all__ = [
    "GodotEnvironment",
    "create_environment",
    "GODOT_FILENAME_PREFIX",
    "GODOT_URL_PREFIX",
    "GODOT_SHARP_DLL",
    "LOCALIZATION_BUNDLE_SUFFIX",
]
