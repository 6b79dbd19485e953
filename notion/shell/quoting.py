"""Quoting helpers for Bourne-family shell statements."""


def single_quote(value: str, escape: bool = False) -> str:
    """Wrap a value in single quotes.

    Embedded single quotes are left as-is unless ``escape`` is set, in which
    case each one is closed, emitted inside double quotes and reopened
    (``'"'"'``), so the result is always a single shell word.

    Args:
        value: Raw string, typically a PATH value.
        escape: Escape embedded single quotes.

    Returns:
        The quoted value.
    """
    if escape:
        value = value.replace("'", "'\"'\"'")
    return f"'{value}'"


def home_relative(subdir: str) -> str:
    """Double-quoted ``${HOME}`` expression for a directory under the home dir.

    The expression is expanded by the shell when the postscript is sourced.
    """
    return f'"${{HOME}}/{subdir}"'


def export_statement(name: str, value: str) -> str:
    return f"export {name}={value}\n"


def unset_statement(name: str) -> str:
    return f"unset {name}\n"
