"""
Build command execution.

The bootstrapper launches the build through a ``ProcessRunner`` so callers can
substitute a runner that records the command and environment instead of
launching a process.
"""

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence

from ndkbuild.core.exceptions import BuildFailure, SpawnError

logger = logging.getLogger(__name__)


class ProcessRunner(ABC):
    """
    Abstract interface for launching the build command.
    """

    @abstractmethod
    def find_executable(self, name: str, path: str) -> Optional[str]:
        """
        Locate an executable on a search path.

        Args:
            name: Executable name or path
            path: Search path to look in

        Returns:
            Full path of the executable, or None if not found
        """
        pass

    @abstractmethod
    def run(self, argv: Sequence[str], env: Mapping[str, str]) -> int:
        """
        Run a command to completion.

        Args:
            argv: Command line; argv[0] is the resolved executable
            env: Complete environment for the child process

        Returns:
            Exit code of the child process

        Raises:
            SpawnError: If the process cannot be launched
        """
        pass


class SubprocessRunner(ProcessRunner):
    """Runs commands with ``subprocess``, inheriting stdout and stderr."""

    def find_executable(self, name: str, path: str) -> Optional[str]:
        return shutil.which(name, path=path)

    def run(self, argv: Sequence[str], env: Mapping[str, str]) -> int:
        try:
            result = subprocess.run(list(argv), env=dict(env))
        except OSError as e:
            raise SpawnError(argv[0], str(e))
        return result.returncode


def invoke_build(
    argv: Sequence[str],
    env: Mapping[str, str],
    runner: Optional[ProcessRunner] = None,
) -> int:
    """
    Run the build command and wait for it.

    Args:
        argv: Build command line
        env: Environment for the build; its PATH is used to find argv[0]
        runner: Process runner (default: SubprocessRunner)

    Returns:
        0 when the build succeeds

    Raises:
        SpawnError: If the command is not found on PATH
        BuildFailure: If the command exits with a non-zero status
    """
    if runner is None:
        runner = SubprocessRunner()

    command = argv[0]
    executable = runner.find_executable(command, env.get("PATH", ""))
    if executable is None:
        raise SpawnError(command, "not found on PATH")

    logger.info(f"Running: {' '.join(argv)}")
    logger.debug(f"Resolved {command} -> {executable}")

    code = runner.run([executable, *argv[1:]], env)
    if code != 0:
        raise BuildFailure(code)
    return code


__all__ = ["ProcessRunner", "SubprocessRunner", "invoke_build"]
