"""
ndkbuild CLI module.

This module provides the command-line interface for ndkbuild.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
