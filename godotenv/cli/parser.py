"""
GodotEnv CLI argument parser.

This module implements the command-line interface for GodotEnv using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from godotenv import __version__
from godotenv.config.settings import load_settings
from godotenv.core.exceptions import GodotEnvError
from godotenv.core.platform import OSType
from godotenv.core.version import parse_version
from godotenv.environment import GodotEnvironment, LoggingSearchLog, create_environment

logger = logging.getLogger(__name__)


class CLI:
    """GodotEnv command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="godotenv",
            description="GodotEnv - Godot version and export template paths",
            epilog='Use "godotenv COMMAND --help" for command-specific help',
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"GodotEnv {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--settings",
            type=Path,
            metavar="PATH",
            help="Path to settings file (default: ~/.godotenv/settings.yaml)",
        )
        parser.add_argument(
            "--os",
            choices=[os_type.value for os_type in OSType if os_type is not OSType.UNKNOWN],
            metavar="OS",
            help="Target operating system (windows|macos|linux) [default: current]",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        url = subparsers.add_parser(
            "url",
            help="Print the download URL of a Godot release",
        )
        url.add_argument("version", help="Godot version (e.g., 4.2.1, 4.3-rc1)")
        url.add_argument(
            "--dotnet", action="store_true", help="Use the .NET-enabled build"
        )
        url.add_argument(
            "--templates",
            action="store_true",
            help="Print the export templates URL instead of the editor URL",
        )

        templates = subparsers.add_parser(
            "templates-path",
            help="Print where export templates are installed",
        )
        templates.add_argument("version", help="Godot version (e.g., 4.2.1)")
        templates.add_argument(
            "--dotnet", action="store_true", help="Use the .NET-enabled build"
        )

        find = subparsers.add_parser(
            "find",
            help="List the Godot executables in an extracted installation",
        )
        find.add_argument("directory", type=Path, help="Directory to search")

        subparsers.add_parser("describe", help="Describe the current platform")

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except GodotEnvError as e:
            logger.error(f"Error: {e}")
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(level=level, format=format_str, force=True)

    def _create_environment(self, args) -> GodotEnvironment:
        settings = load_settings(args.settings)
        os_type = OSType.from_name(args.os) if args.os else None
        return create_environment(os_type=os_type, settings=settings)

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        environment = self._create_environment(args)

        if args.command == "url":
            version = parse_version(args.version)
            print(environment.get_download_url(version, args.dotnet, args.templates))
        elif args.command == "templates-path":
            version = parse_version(args.version)
            print(environment.get_export_templates_local_path(version, args.dotnet))
        elif args.command == "find":
            for path in environment.find_executables_recursively(
                args.directory, LoggingSearchLog(logger)
            ):
                print(path)
        elif args.command == "describe":
            environment.describe(LoggingSearchLog(logger))
        else:
            logger.error(f"Unknown command: {args.command}")
            return 1

        return 0


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
