"""
Configuration for ndkbuild.
"""

from ndkbuild.config.settings import BootstrapConfig, load_config

__all__ = ["BootstrapConfig", "load_config"]
