"""Postscript intents: the environment changes a postscript can express.

A postscript is one of ``Activate``, ``Deactivate`` or ``ToolVersion``. Each
shell family renders every variant into its own syntax.
"""

import re
from dataclasses import dataclass
from typing import Union

import semver

from notion.errors import InvalidToolName


# Variable pointing at the notion home directory while activated
HOME_VAR = "NOTION_HOME"

# Prefix for per-tool version variables (NOTION_NODE_VERSION, ...)
VERSION_VAR_PREFIX = "NOTION"

# Notion home directory, relative to the user's home directory
NOTION_DIR = ".notion"

_IDENTIFIER = re.compile(r"[A-Z_][A-Z0-9_]*")


@dataclass(frozen=True)
class Activate:
    """The toolchain was turned on.

    Attributes:
        home_path: New PATH value with the notion shims prepended.
    """

    home_path: str


@dataclass(frozen=True)
class Deactivate:
    """The toolchain was turned off.

    Attributes:
        restored_path: PATH value with the notion entries removed.
    """

    restored_path: str


@dataclass(frozen=True)
class ToolVersion:
    """A single tool's active version changed.

    Attributes:
        tool: Tool name, e.g. ``node``.
        version: The newly active version.
    """

    tool: str
    version: semver.Version

    def __post_init__(self):
        if not self.tool or not _IDENTIFIER.fullmatch(self.tool.upper()):
            raise InvalidToolName(self.tool)

    @classmethod
    def parse(cls, tool: str, version: str) -> "ToolVersion":
        """Build an intent from a version string.

        Raises:
            ValueError: If ``version`` is not a valid semantic version.
            InvalidToolName: If ``tool`` cannot name a variable.
        """
        return cls(tool=tool, version=semver.Version.parse(version))

    @property
    def variable_name(self) -> str:
        """Environment variable holding this tool's version."""
        return f"{VERSION_VAR_PREFIX}_{self.tool.upper()}_VERSION"


Postscript = Union[Activate, Deactivate, ToolVersion]
