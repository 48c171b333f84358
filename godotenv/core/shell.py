"""
Process execution for GodotEnv.

Environments use a Shell to ask the operating system about files (for
example ``file --mime-type`` on macOS) when a permission bit or extension is
not enough to tell whether a file is a runnable Godot executable.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Union

from godotenv.core.exceptions import ShellError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class ProcessResult:
    """Result of a finished process."""

    exit_code: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class Shell:
    """
    Runs commands in a fixed working directory.

    Example:
        >>> shell = Shell(Path("/opt/godot"))
        >>> shell.run("file", "--mime-type", "-b", "Godot").stdout
        'application/x-mach-binary\\n'
    """

    def __init__(self, working_dir: Union[str, Path], timeout: float = DEFAULT_TIMEOUT):
        self.working_dir = Path(working_dir)
        self.timeout = timeout

    def run(self, *args: str) -> ProcessResult:
        """
        Run a command and capture its output.

        Args:
            *args: Command and arguments

        Returns:
            ProcessResult with exit code and captured output

        Raises:
            ShellError: If the command cannot be started or times out
        """
        logger.debug(f"Running {' '.join(args)} in {self.working_dir}")
        try:
            result = subprocess.run(
                list(args),
                cwd=self.working_dir,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise ShellError(f"Command not found: {args[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise ShellError(
                f"Command timed out after {self.timeout}s: {' '.join(args)}"
            ) from e
        except OSError as e:
            raise ShellError(f"Failed to run {args[0]}: {e}") from e

        return ProcessResult(
            exit_code=result.returncode, stdout=result.stdout, stderr=result.stderr
        )

    def succeeds(self, *args: str) -> bool:
        """Run a command and report whether it exited with status 0."""
        return self.run(*args).succeeded


ShellFactory = Callable[[Path], Shell]


__all__ = ["Shell", "ShellFactory", "ProcessResult", "DEFAULT_TIMEOUT"]
