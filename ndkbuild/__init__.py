"""
ndkbuild: Android NDK build-environment bootstrapper.

Resolves the host's NDK LLVM toolchain directory, appends it to the build
environment's PATH and runs the Android build command.
"""

__version__ = "0.1.0"
