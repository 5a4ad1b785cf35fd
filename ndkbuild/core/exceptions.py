"""
Centralized exception hierarchy for ndkbuild.

Every error carries the process exit code the CLI reports for it, so the
top level can terminate with a status that identifies the failing stage.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class NdkBuildError(Exception):
    """Base exception for all ndkbuild errors."""

    exit_code = 1
    stage = "bootstrap"


# ============================================================================
# Bootstrap Stages
# ============================================================================


class ConfigurationError(NdkBuildError):
    """Raised when the build environment cannot be configured."""

    exit_code = 78  # EX_CONFIG
    stage = "configuration"


class SpawnError(NdkBuildError):
    """Raised when the build command cannot be launched."""

    exit_code = 127
    stage = "spawn"

    def __init__(self, command: str, reason: str = ""):
        self.command = command
        msg = f"Build command not found or not executable: {command}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class BuildFailure(NdkBuildError):
    """Raised when the build command runs but exits with a non-zero status."""

    stage = "build"

    def __init__(self, code: int):
        self.code = code
        # Negative codes mean the child was killed by a signal
        self.exit_code = code if code > 0 else 128 - code
        super().__init__(f"Build command exited with status {code}")


__all__ = [
    "NdkBuildError",
    "ConfigurationError",
    "SpawnError",
    "BuildFailure",
]
