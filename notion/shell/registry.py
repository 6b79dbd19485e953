"""Registry of supported shell families.

Maps the shell name found in NOTION_SHELL to the information needed to build
a ``Shell`` for it. The registry is fixed at construction; adding a shell
means adding a ``ShellKind`` member, a renderer module, a branch in
``Shell.compile_postscript`` and an entry here.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from notion.errors import UnrecognizedShell
from notion.shell import bash
from notion.shell.base import Shell, ShellKind


@dataclass(frozen=True)
class ShellInfo:
    """Information about a supported shell family."""

    kind: ShellKind
    description: str
    postscript_filename: str               # Created inside NOTION_POSTSCRIPT

    @property
    def name(self) -> str:
        return self.kind.value

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "postscript_filename": self.postscript_filename,
        }


class ShellRegistry:
    """Registry of supported shells.

    Lookups are by exact, case-sensitive name.

    Example:
        registry = ShellRegistry()
        shell = registry.build("bash", "/home/me/.notion/tmp")
    """

    def __init__(self):
        """Initialize the registry with the supported shells."""
        self._shells: dict[str, ShellInfo] = {}
        self._register(ShellInfo(
            kind=ShellKind.BASH,
            description="Bourne-again shell and compatible POSIX shells",
            postscript_filename=bash.POSTSCRIPT_FILENAME,
        ))

    def _register(self, info: ShellInfo) -> None:
        self._shells[info.name] = info

    def get(self, name: str) -> Optional[ShellInfo]:
        """Get shell info by name.

        Args:
            name: Shell name, e.g. ``bash``.

        Returns:
            ShellInfo or None if the name is not supported.
        """
        return self._shells.get(name)

    def get_all(self) -> list[ShellInfo]:
        """Get all supported shells."""
        return list(self._shells.values())

    def names(self) -> list[str]:
        """Get the names of all supported shells."""
        return list(self._shells)

    def __contains__(self, name: str) -> bool:
        return name in self._shells

    def __len__(self) -> int:
        return len(self._shells)

    def build(
        self,
        name: str,
        postscript_dir: Path,
        escape_quotes: bool = False,
    ) -> Shell:
        """Build the shell for ``name`` writing under ``postscript_dir``.

        Args:
            name: Shell name.
            postscript_dir: Directory holding the postscript file.
            escape_quotes: Escape single quotes in quoted path values.

        Returns:
            Shell with an absolute postscript path.

        Raises:
            UnrecognizedShell: If ``name`` is not supported.
        """
        info = self.get(name)
        if info is None:
            raise UnrecognizedShell(name)

        postscript_path = Path(postscript_dir).absolute() / info.postscript_filename
        return Shell(
            kind=info.kind,
            postscript_path=postscript_path,
            escape_quotes=escape_quotes,
        )
