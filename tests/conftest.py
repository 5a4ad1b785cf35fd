"""
Pytest configuration and shared fixtures for ndkbuild tests.
"""

import pytest

from ndkbuild.core.platform import LINUX_PROFILE
from tests.mocks import FakeRunner


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Runner that finds cargo and reports a successful build."""
    return FakeRunner(exit_code=0, executables={"cargo": "/usr/bin/cargo"})


@pytest.fixture
def missing_runner() -> FakeRunner:
    """Runner that finds no executables."""
    return FakeRunner()


@pytest.fixture
def linux_profile():
    return LINUX_PROFILE


@pytest.fixture
def host_env(tmp_path):
    """Minimal inherited environment with a temporary home directory."""
    return {"HOME": str(tmp_path / "home"), "PATH": "/usr/local/bin:/usr/bin", "LANG": "C"}


@pytest.fixture
def ndk_home(tmp_path):
    """Home directory containing a Linux NDK toolchain bin directory."""
    home = tmp_path / "home"
    bin_dir = (
        home
        / "Android"
        / "android-ndk-r26b"
        / "toolchains"
        / "llvm"
        / "prebuilt"
        / "linux-x86_64"
        / "bin"
    )
    bin_dir.mkdir(parents=True)
    return home
