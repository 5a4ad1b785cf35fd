"""
ndkbuild CLI argument parser.

This module implements the command-line interface for ndkbuild using argparse.
Running ``ndkbuild`` with no arguments performs the Android build.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("ndkbuild")
except Exception:
    __version__ = "0.1.0"

from ndkbuild.core.exceptions import NdkBuildError

logger = logging.getLogger(__name__)


class CLI:
    """ndkbuild command-line interface."""

    def __init__(self, runner=None):
        """
        Initialize CLI with argument parser.

        Args:
            runner: ProcessRunner for the build (default: SubprocessRunner)
        """
        self.runner = runner
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="ndkbuild",
            description="Build for Android ARM64 with the host's NDK LLVM toolchain",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "--version", action="version", version=f"ndkbuild {__version__}"
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
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./ndkbuild.yaml)",
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code of the build, or the exit code of the failing stage
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        from ndkbuild.config.settings import load_config
        from ndkbuild.core.bootstrap import bootstrap

        try:
            config = load_config(parsed_args.config)
            return bootstrap(config, runner=self.runner)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except NdkBuildError as e:
            logger.error(f"{e.stage.capitalize()} failed: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return e.exit_code

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

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
