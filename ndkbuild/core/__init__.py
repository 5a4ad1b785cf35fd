"""
Core functionality for ndkbuild.

Platform detection, error types and build execution. Environment construction
lives in ``ndkbuild.core.environment`` and depends on ``ndkbuild.config``.
"""

from .exceptions import (
    NdkBuildError,
    ConfigurationError,
    SpawnError,
    BuildFailure,
)

from .platform import (
    OSIdentifier,
    PlatformProfile,
    detect_platform,
)

from .runner import (
    ProcessRunner,
    SubprocessRunner,
    invoke_build,
)

__all__ = [
    "NdkBuildError",
    "ConfigurationError",
    "SpawnError",
    "BuildFailure",
    "OSIdentifier",
    "PlatformProfile",
    "detect_platform",
    "ProcessRunner",
    "SubprocessRunner",
    "invoke_build",
]
