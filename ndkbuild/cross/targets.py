"""
Android cross-compilation targets.

Maps Android ABIs to the target triples the native build tool expects.
"""

from ndkbuild.core.exceptions import ConfigurationError

ANDROID_TARGET_TRIPLES = {
    "arm64-v8a": "aarch64-linux-android",
    "armeabi-v7a": "armv7-linux-androideabi",
    "x86_64": "x86_64-linux-android",
    "x86": "i686-linux-android",
}

DEFAULT_ABI = "arm64-v8a"


def target_triple(abi: str = DEFAULT_ABI) -> str:
    """
    Get the target triple for an Android ABI.

    Args:
        abi: Android ABI (arm64-v8a, armeabi-v7a, x86_64, x86)

    Returns:
        Target triple (e.g., 'aarch64-linux-android')

    Raises:
        ConfigurationError: If ABI is not supported
    """
    if abi not in ANDROID_TARGET_TRIPLES:
        raise ConfigurationError(
            f"Unsupported Android ABI: {abi}. "
            f"Supported ABIs: {', '.join(ANDROID_TARGET_TRIPLES.keys())}"
        )
    return ANDROID_TARGET_TRIPLES[abi]
