"""Shell integration for Notion.

Notion cannot change the environment of the shell that launched it, so each
command that needs to writes a postscript: a short script the shell sources
after the command returns.
"""

from .postscript import (
    Activate,
    Deactivate,
    ToolVersion,
    Postscript,
    HOME_VAR,
    VERSION_VAR_PREFIX,
)
from .base import Shell, ShellKind
from .registry import ShellRegistry, ShellInfo
from .detector import detect, detect_shell
from .writer import save_postscript

__all__ = [
    # Postscript intents
    "Activate",
    "Deactivate",
    "ToolVersion",
    "Postscript",
    "HOME_VAR",
    "VERSION_VAR_PREFIX",
    # Shells
    "Shell",
    "ShellKind",
    "ShellRegistry",
    "ShellInfo",
    # Detection
    "detect",
    "detect_shell",
    # Writer
    "save_postscript",
]
