"""Bash postscript rendering.

Every intent renders to one or more ``export``/``unset`` statements, one per
line, with a single trailing newline and no blank lines.
"""

from notion.shell.postscript import (
    HOME_VAR,
    NOTION_DIR,
    Activate,
    Deactivate,
    Postscript,
    ToolVersion,
)
from notion.shell.quoting import (
    export_statement,
    home_relative,
    single_quote,
    unset_statement,
)

SHELL_NAME = "bash"
POSTSCRIPT_FILENAME = "postscript.sh"


def compile_postscript(postscript: Postscript, escape_quotes: bool = False) -> str:
    """Render a postscript intent as bash statements.

    Args:
        postscript: Intent to render.
        escape_quotes: Escape single quotes inside PATH values.

    Returns:
        Script text ending in exactly one newline.
    """
    if isinstance(postscript, Activate):
        return (
            export_statement("PATH", single_quote(postscript.home_path, escape_quotes))
            + export_statement(HOME_VAR, home_relative(NOTION_DIR))
        )
    elif isinstance(postscript, Deactivate):
        return (
            export_statement("PATH", single_quote(postscript.restored_path, escape_quotes))
            + unset_statement(HOME_VAR)
        )
    elif isinstance(postscript, ToolVersion):
        # Canonical semver strings contain no shell metacharacters
        return export_statement(postscript.variable_name, str(postscript.version))

    raise TypeError(f"Not a postscript intent: {postscript!r}")
