"""
Mock implementations for testing ndkbuild components.

This package provides mock implementations of process launching so the
bootstrap sequence can be tested without spawning real builds.
"""

from .runner import FakeRunner

__all__ = ["FakeRunner"]
