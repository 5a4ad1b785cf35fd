"""
Bootstrap configuration.

Defaults reproduce the stock Android build: NDK r26b under ``~/Android`` and
``cargo build --release --target aarch64-linux-android``. An optional YAML
file can override them:

    ndk:
      version: r26b
      parent: Android
    build:
      command: cargo
      args: [build, --release]
      abi: arm64-v8a
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ndkbuild.core.exceptions import ConfigurationError
from ndkbuild.cross.targets import DEFAULT_ABI, target_triple

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "ndkbuild.yaml"
DEFAULT_NDK_VERSION = "r26b"
DEFAULT_NDK_PARENT = "Android"
DEFAULT_COMMAND = "cargo"
DEFAULT_BUILD_ARGS = ("build", "--release")


@dataclass(frozen=True)
class BootstrapConfig:
    """
    Settings for one bootstrap run.

    Attributes:
        ndk_version: NDK release (e.g., 'r26b')
        ndk_parent: Directory under home holding the NDK install
        abi: Android ABI to build for
        command: Build command executable name
        build_args: Arguments passed before the target selection
    """

    ndk_version: str = DEFAULT_NDK_VERSION
    ndk_parent: str = DEFAULT_NDK_PARENT
    abi: str = DEFAULT_ABI
    command: str = DEFAULT_COMMAND
    build_args: Tuple[str, ...] = DEFAULT_BUILD_ARGS

    def target(self) -> str:
        """Target triple for the configured ABI."""
        return target_triple(self.abi)

    def build_argv(self) -> List[str]:
        """
        Full command line of the build.

        Example:
            >>> BootstrapConfig().build_argv()
            ['cargo', 'build', '--release', '--target', 'aarch64-linux-android']
        """
        return [self.command, *self.build_args, "--target", self.target()]


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, a missing file is an error

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigurationError: If a required file is missing, unreadable, or not valid YAML
    """
    if not config_file.exists():
        if required:
            raise ConfigurationError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read {config_file}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {config_file}")
    return config


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = config.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"'{name}' must be a mapping")
    return value


def _string(section: Dict[str, Any], key: str, default: str, where: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"'{where}.{key}' must be a non-empty string")
    return value


def config_from_dict(config: Dict[str, Any]) -> BootstrapConfig:
    """
    Build a BootstrapConfig from a parsed configuration dictionary.

    Raises:
        ConfigurationError: If a value has the wrong type or the ABI is unknown
    """
    ndk = _section(config, "ndk")
    build = _section(config, "build")

    args = build.get("args", list(DEFAULT_BUILD_ARGS))
    if not isinstance(args, list) or not all(isinstance(a, str) for a in args):
        raise ConfigurationError("'build.args' must be a list of strings")

    settings = BootstrapConfig(
        ndk_version=_string(ndk, "version", DEFAULT_NDK_VERSION, "ndk"),
        ndk_parent=_string(ndk, "parent", DEFAULT_NDK_PARENT, "ndk"),
        abi=_string(build, "abi", DEFAULT_ABI, "build"),
        command=_string(build, "command", DEFAULT_COMMAND, "build"),
        build_args=tuple(args),
    )
    # Fail on an unknown ABI before anything is launched
    settings.target()
    return settings


def load_config(
    config_file: Optional[Path] = None, project_root: Optional[Path] = None
) -> BootstrapConfig:
    """
    Load bootstrap settings.

    Args:
        config_file: Explicit configuration file; must exist if given
        project_root: Directory searched for ``ndkbuild.yaml`` (default: cwd)

    Returns:
        BootstrapConfig with file values applied over the defaults
    """
    if config_file is not None:
        data = load_yaml_config(Path(config_file), required=True)
    else:
        root = project_root if project_root is not None else Path.cwd()
        data = load_yaml_config(root / DEFAULT_CONFIG_FILE)

    return config_from_dict(data)


__all__ = [
    "BootstrapConfig",
    "DEFAULT_CONFIG_FILE",
    "load_yaml_config",
    "config_from_dict",
    "load_config",
]
