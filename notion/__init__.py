"""Notion - shell integration for a JavaScript toolchain manager.

Generates the postscript files that the user's shell sources after each
notion command to pick up PATH and version variable changes.
"""

__version__ = "0.1.0"
__author__ = "Notion Team"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
