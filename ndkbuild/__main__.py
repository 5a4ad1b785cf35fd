"""
Entry point for running ndkbuild as a module.

Usage: python -m ndkbuild [options]
"""

from ndkbuild.cli.parser import main

if __name__ == "__main__":
    main()
