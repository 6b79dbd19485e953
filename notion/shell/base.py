"""Shell families and the per-invocation shell value."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from notion.shell import bash
from notion.shell.postscript import Postscript


class ShellKind(str, Enum):
    """Supported shell families."""

    BASH = "bash"


@dataclass(frozen=True)
class Shell:
    """The shell notion is running under.

    Built once per invocation by the detector and never mutated.

    Attributes:
        kind: Shell family.
        postscript_path: Absolute path the shell sources after each command.
        escape_quotes: Escape single quotes inside quoted path values.
    """

    kind: ShellKind
    postscript_path: Path
    escape_quotes: bool = False

    def compile_postscript(self, postscript: Postscript) -> str:
        """Render an intent in this shell's syntax."""
        if self.kind == ShellKind.BASH:
            return bash.compile_postscript(postscript, escape_quotes=self.escape_quotes)
        raise AssertionError(f"No postscript compiler for shell {self.kind!r}")

    def save_postscript(self, postscript: Postscript) -> Path:
        """Compile an intent and write it to ``postscript_path``.

        Returns:
            The path written.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        from notion.shell.writer import save_postscript

        return save_postscript(self, postscript)
