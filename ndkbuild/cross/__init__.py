"""
Android cross-compilation target support for ndkbuild.
"""

from ndkbuild.cross.targets import ANDROID_TARGET_TRIPLES, target_triple

__all__ = ["ANDROID_TARGET_TRIPLES", "target_triple"]
