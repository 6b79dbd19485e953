"""Detect the running shell from the notion shell integration signals.

Detection is strict: the shell profile installed by notion sets NOTION_SHELL
and NOTION_POSTSCRIPT, and both must be present. Nothing is inferred from
$SHELL or the process tree and there is no default shell.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from notion.config import NotionConfig
from notion.errors import UnrecognizedShell, UnspecifiedPostscript, UnspecifiedShell
from notion.shell.base import Shell
from notion.shell.registry import ShellRegistry

logger = logging.getLogger(__name__)


def detect_shell(
    shell_name: Optional[str],
    postscript_dir: Optional[Union[str, Path]],
    escape_quotes: bool = False,
    registry: Optional[ShellRegistry] = None,
) -> Shell:
    """Resolve the shell from explicit signal values.

    Args:
        shell_name: Value of NOTION_SHELL, or None if unset.
        postscript_dir: Value of NOTION_POSTSCRIPT, or None if unset.
        escape_quotes: Escape single quotes in quoted path values.
        registry: Shell registry. Uses default if not provided.

    Returns:
        The detected shell.

    Raises:
        UnspecifiedShell: If ``shell_name`` is missing.
        UnrecognizedShell: If ``shell_name`` is not a supported shell.
        UnspecifiedPostscript: If ``postscript_dir`` is missing.
    """
    if not shell_name:
        raise UnspecifiedShell()

    registry = registry or ShellRegistry()
    if shell_name not in registry:
        raise UnrecognizedShell(shell_name)

    if postscript_dir is None or str(postscript_dir) == "":
        raise UnspecifiedPostscript()

    shell = registry.build(shell_name, Path(postscript_dir), escape_quotes=escape_quotes)
    logger.debug(f"Detected shell {shell.kind.value}, postscript at {shell.postscript_path}")
    return shell


def detect(config: Optional[NotionConfig] = None) -> Shell:
    """Detect the shell notion is running under.

    Reads NOTION_SHELL, NOTION_POSTSCRIPT and NOTION_ESCAPE_QUOTES from the
    process environment through ``NotionConfig``.

    Args:
        config: Optional NotionConfig instance

    Returns:
        The detected shell.
    """
    if config is None:
        config = NotionConfig()

    return detect_shell(
        config.shell,
        config.postscript,
        escape_quotes=config.escape_quotes,
    )
