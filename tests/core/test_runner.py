"""
Unit tests for build command execution.
"""

import os
import sys
import pytest
from unittest.mock import Mock, patch

from ndkbuild.core.exceptions import BuildFailure, SpawnError
from ndkbuild.core.runner import SubprocessRunner, invoke_build
from tests.mocks import FakeRunner


ARGV = ["cargo", "build", "--release", "--target", "aarch64-linux-android"]


class TestInvokeBuild:
    """Tests for invoke_build with a fake runner."""

    def test_success_returns_zero(self, fake_runner):
        env = {"PATH": "/usr/bin:/ndk/bin"}

        assert invoke_build(ARGV, env, runner=fake_runner) == 0

    def test_runs_resolved_executable_with_arguments(self, fake_runner):
        invoke_build(ARGV, {"PATH": "/usr/bin"}, runner=fake_runner)

        assert fake_runner.last_argv == ["/usr/bin/cargo"] + ARGV[1:]

    def test_passes_environment_unchanged(self, fake_runner):
        env = {"PATH": "/usr/bin:/ndk/bin", "HOME": "/home/u"}

        invoke_build(ARGV, env, runner=fake_runner)

        assert fake_runner.last_env == env

    def test_lookup_uses_environment_path(self, fake_runner):
        invoke_build(ARGV, {"PATH": "/usr/bin:/ndk/bin"}, runner=fake_runner)

        assert fake_runner.lookups == [("cargo", "/usr/bin:/ndk/bin")]

    def test_missing_command_raises_spawn_error(self, missing_runner):
        with pytest.raises(SpawnError) as exc_info:
            invoke_build(ARGV, {"PATH": "/usr/bin"}, runner=missing_runner)

        assert exc_info.value.command == "cargo"
        assert exc_info.value.exit_code == 127
        assert missing_runner.calls == []

    def test_nonzero_exit_raises_build_failure(self):
        runner = FakeRunner(exit_code=101, executables={"cargo": "/usr/bin/cargo"})

        with pytest.raises(BuildFailure) as exc_info:
            invoke_build(ARGV, {"PATH": "/usr/bin"}, runner=runner)

        assert exc_info.value.code == 101
        assert exc_info.value.exit_code == 101


class TestSubprocessRunner:
    """Tests for the subprocess-backed runner."""

    @patch("shutil.which", return_value="/usr/bin/cargo")
    def test_find_executable_uses_given_path(self, mock_which):
        runner = SubprocessRunner()

        assert runner.find_executable("cargo", "/a:/b") == "/usr/bin/cargo"
        mock_which.assert_called_once_with("cargo", path="/a:/b")

    @patch("subprocess.run")
    def test_run_returns_exit_code(self, mock_run):
        mock_run.return_value = Mock(returncode=3)
        runner = SubprocessRunner()

        assert runner.run(["/usr/bin/cargo", "build"], {"PATH": "/usr/bin"}) == 3
        args, kwargs = mock_run.call_args
        assert args[0] == ["/usr/bin/cargo", "build"]
        assert kwargs["env"] == {"PATH": "/usr/bin"}
        assert "stdout" not in kwargs
        assert "timeout" not in kwargs

    @patch("subprocess.run", side_effect=PermissionError("denied"))
    def test_launch_error_raises_spawn_error(self, mock_run):
        runner = SubprocessRunner()

        with pytest.raises(SpawnError):
            runner.run(["/usr/bin/cargo"], {})

    def test_runs_real_process(self):
        runner = SubprocessRunner()
        code = runner.run([sys.executable, "-c", "import sys; sys.exit(4)"], dict(os.environ))

        assert code == 4
