"""
Build environment construction.

Resolves the NDK toolchain directory for the host and produces the
environment mapping the build command runs with. The mapping is a copy;
``os.environ`` is left untouched.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional

from ndkbuild.config.settings import (
    BootstrapConfig,
    DEFAULT_NDK_PARENT,
    DEFAULT_NDK_VERSION,
)
from ndkbuild.core.exceptions import ConfigurationError
from ndkbuild.core.platform import PlatformProfile, detect_platform

logger = logging.getLogger(__name__)

HOME_VARIABLES = ("HOME", "USERPROFILE")
PATH_VARIABLE = "PATH"


@dataclass(frozen=True)
class BuildEnvironment:
    """
    Explicit environment for the build subprocess.

    Attributes:
        profile: Platform profile selected for this run
        home: Home directory the toolchain path was resolved under
        toolchain_dir: NDK LLVM toolchain bin directory
        env: Complete environment for the child process
    """

    profile: PlatformProfile
    home: Path
    toolchain_dir: Path
    env: Dict[str, str]

    @property
    def search_path(self) -> str:
        return self.env.get(PATH_VARIABLE, "")


def resolve_home(env: Optional[Mapping[str, str]] = None) -> Path:
    """
    Resolve the user's home directory from the environment.

    Args:
        env: Environment mapping (default: os.environ)

    Returns:
        Home directory path

    Raises:
        ConfigurationError: If no home variable is set
    """
    if env is None:
        env = os.environ

    for name in HOME_VARIABLES:
        value = env.get(name)
        if value:
            return Path(value)

    raise ConfigurationError(
        f"Cannot determine home directory: none of {', '.join(HOME_VARIABLES)} is set"
    )


def resolve_toolchain_path(
    profile: PlatformProfile,
    home: Optional[Path],
    ndk_version: str = DEFAULT_NDK_VERSION,
    ndk_parent: str = DEFAULT_NDK_PARENT,
) -> Path:
    """
    Get the NDK LLVM toolchain bin directory for a platform.

    The path is not checked for existence.

    Args:
        profile: Host platform profile
        home: Home directory
        ndk_version: NDK release (e.g., 'r26b')
        ndk_parent: Directory under home holding the NDK

    Returns:
        ``home/<parent>/android-ndk-<version>/toolchains/llvm/prebuilt/<prebuilt>/bin``

    Raises:
        ConfigurationError: If home is not given

    Example:
        >>> from ndkbuild.core.platform import LINUX_PROFILE
        >>> resolve_toolchain_path(LINUX_PROFILE, Path('/home/u')).as_posix()
        '/home/u/Android/android-ndk-r26b/toolchains/llvm/prebuilt/linux-x86_64/bin'
    """
    if home is None or str(home) == "":
        raise ConfigurationError("Cannot determine home directory")

    return (
        Path(home)
        / ndk_parent
        / f"android-ndk-{ndk_version}"
        / "toolchains"
        / "llvm"
        / "prebuilt"
        / profile.prebuilt
        / "bin"
    )


def augment_search_path(
    current: Optional[str], additions: Iterable[str], sep: str = os.pathsep
) -> str:
    """
    Append directories to an executable search path.

    Existing entries keep their order and resolve first. Additions already
    on the path are not appended again.

    Args:
        current: Existing search path (may be empty or None)
        additions: Directories to append, in order
        sep: Path list separator

    Returns:
        New search path string
    """
    entries = current.split(sep) if current else []
    for addition in additions:
        addition = str(addition)
        if addition not in entries:
            entries.append(addition)
    return sep.join(entries)


def build_environment(
    config: BootstrapConfig,
    profile: Optional[PlatformProfile] = None,
    env: Optional[Mapping[str, str]] = None,
) -> BuildEnvironment:
    """
    Build the environment for the build subprocess.

    Args:
        config: Bootstrap settings
        profile: Platform profile (default: detected from the host)
        env: Inherited environment (default: os.environ)

    Returns:
        BuildEnvironment with the toolchain directory appended to PATH

    Raises:
        ConfigurationError: If the home directory cannot be determined
    """
    if env is None:
        env = os.environ
    if profile is None:
        profile = detect_platform()

    home = resolve_home(env)
    toolchain_dir = resolve_toolchain_path(
        profile, home, config.ndk_version, config.ndk_parent
    )
    if not toolchain_dir.is_dir():
        logger.warning(f"NDK toolchain directory does not exist: {toolchain_dir}")

    child_env = dict(env)
    child_env[PATH_VARIABLE] = augment_search_path(
        env.get(PATH_VARIABLE), [str(toolchain_dir)]
    )
    logger.debug(f"{PATH_VARIABLE}={child_env[PATH_VARIABLE]}")

    return BuildEnvironment(
        profile=profile, home=home, toolchain_dir=toolchain_dir, env=child_env
    )


__all__ = [
    "BuildEnvironment",
    "resolve_home",
    "resolve_toolchain_path",
    "augment_search_path",
    "build_environment",
]
