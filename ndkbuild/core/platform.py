"""
Host platform detection for ndkbuild.

This module maps the host operating system to the NDK prebuilt directory that
holds its LLVM toolchain.

Detection is a closed mapping:
- The OS signal (``uname -o``, or ``platform.system()`` where uname is missing)
  is classified into an ``OSIdentifier``
- Each identifier maps to exactly one ``PlatformProfile``
- Anything that is neither Linux nor Darwin gets the Windows profile

Usage:
    from ndkbuild.core.platform import detect_platform

    profile = detect_platform()
    print(f"Prebuilt directory: {profile.prebuilt}")
"""

import logging
import platform
import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class OSIdentifier(Enum):
    """Host operating systems recognized by the bootstrapper."""

    LINUX = "linux"
    DARWIN = "darwin"
    WINDOWS = "windows"
    OTHER = "other"


@dataclass(frozen=True)
class PlatformProfile:
    """
    Platform profile selected for a single run.

    Attributes:
        os: Host operating system identifier
        prebuilt: NDK prebuilt directory name (e.g., 'linux-x86_64')
    """

    os: OSIdentifier
    prebuilt: str

    def __str__(self) -> str:
        return f"{self.os.value} ({self.prebuilt})"


LINUX_PROFILE = PlatformProfile(OSIdentifier.LINUX, "linux-x86_64")
DARWIN_PROFILE = PlatformProfile(OSIdentifier.DARWIN, "darwin-x86_64")
WINDOWS_PROFILE = PlatformProfile(OSIdentifier.WINDOWS, "windows-x86_64")

_PROFILES = {
    OSIdentifier.LINUX: LINUX_PROFILE,
    OSIdentifier.DARWIN: DARWIN_PROFILE,
    OSIdentifier.WINDOWS: WINDOWS_PROFILE,
    # Unrecognized hosts use the Windows toolchain
    OSIdentifier.OTHER: WINDOWS_PROFILE,
}

_WINDOWS_MARKERS = ("Windows", "Msys", "Cygwin", "MINGW")


def read_os_signal() -> str:
    """
    Read the OS-identifying signal of the host.

    Returns:
        Output of ``uname -o`` (e.g., 'GNU/Linux', 'Darwin', 'Msys'), or
        ``platform.system()`` when uname cannot be run
    """
    try:
        result = subprocess.run(
            ["uname", "-o"], capture_output=True, text=True, timeout=5
        )
        if result.returncode == 0 and result.stdout.strip():
            return result.stdout.strip()
        logger.debug(f"uname -o returned {result.returncode}, using platform.system()")
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug(f"uname unavailable ({e}), using platform.system()")

    return platform.system()


def classify_os(signal: str) -> OSIdentifier:
    """
    Classify an OS signal.

    Args:
        signal: OS-identifying string such as 'GNU/Linux' or 'Darwin'

    Returns:
        The first matching identifier in the order Linux, Darwin, Windows;
        OTHER when nothing matches
    """
    if "Linux" in signal:
        return OSIdentifier.LINUX
    elif "Darwin" in signal:
        return OSIdentifier.DARWIN
    elif any(marker in signal for marker in _WINDOWS_MARKERS):
        return OSIdentifier.WINDOWS
    else:
        return OSIdentifier.OTHER


def profile_for(os_id: OSIdentifier) -> PlatformProfile:
    """Return the platform profile for an OS identifier."""
    return _PROFILES[os_id]


def detect_platform(signal: Optional[str] = None) -> PlatformProfile:
    """
    Detect the platform profile of the host.

    Args:
        signal: OS signal to classify. If None, reads it from the host.

    Returns:
        PlatformProfile for the host; never raises

    Example:
        >>> detect_platform("GNU/Linux").prebuilt
        'linux-x86_64'
        >>> detect_platform("SomeBSD").prebuilt
        'windows-x86_64'
    """
    if signal is None:
        signal = read_os_signal()

    os_id = classify_os(signal)
    if os_id is OSIdentifier.OTHER:
        logger.debug(f"Unrecognized OS '{signal}', falling back to Windows toolchain")

    profile = profile_for(os_id)
    logger.debug(f"OS signal '{signal}' -> {profile}")
    return profile


__all__ = [
    "OSIdentifier",
    "PlatformProfile",
    "LINUX_PROFILE",
    "DARWIN_PROFILE",
    "WINDOWS_PROFILE",
    "read_os_signal",
    "classify_os",
    "profile_for",
    "detect_platform",
]
