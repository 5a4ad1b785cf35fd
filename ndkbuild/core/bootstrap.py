"""
One-shot bootstrap sequence: detect platform, build environment, run build.
"""

import logging
from typing import Mapping, Optional

from ndkbuild.config.settings import BootstrapConfig
from ndkbuild.core.environment import build_environment
from ndkbuild.core.platform import detect_platform
from ndkbuild.core.runner import ProcessRunner, invoke_build

logger = logging.getLogger(__name__)


def bootstrap(
    config: Optional[BootstrapConfig] = None,
    runner: Optional[ProcessRunner] = None,
    env: Optional[Mapping[str, str]] = None,
    signal: Optional[str] = None,
) -> int:
    """
    Run the bootstrap sequence once.

    Args:
        config: Bootstrap settings (default: built-in defaults)
        runner: Process runner (default: SubprocessRunner)
        env: Inherited environment (default: os.environ)
        signal: OS signal override (default: read from the host)

    Returns:
        Exit code of the build (0)

    Raises:
        ConfigurationError, SpawnError, BuildFailure
    """
    if config is None:
        config = BootstrapConfig()

    argv = config.build_argv()
    profile = detect_platform(signal)
    build_env = build_environment(config, profile=profile, env=env)
    logger.info(f"Using NDK toolchain: {build_env.toolchain_dir}")

    return invoke_build(argv, build_env.env, runner=runner)


__all__ = ["bootstrap"]
