"""Persist compiled postscripts to disk."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from notion.fs import ensure_containing_dir_exists
from notion.shell.postscript import Postscript

if TYPE_CHECKING:
    from notion.shell.base import Shell

logger = logging.getLogger(__name__)


def save_postscript(shell: "Shell", postscript: Postscript) -> Path:
    """Write ``postscript`` to the shell's postscript file.

    Missing parent directories are created. The file is truncated and written
    in a single call; its previous content is discarded. Filesystem errors
    propagate unchanged.

    Args:
        shell: Shell whose syntax and path to use.
        postscript: Intent to render.

    Returns:
        The path written.
    """
    path = shell.postscript_path
    ensure_containing_dir_exists(path)

    text = shell.compile_postscript(postscript)
    path.write_text(text, encoding="utf-8", newline="\n")

    logger.debug(f"Wrote {shell.kind.value} postscript to {path}")
    return path
