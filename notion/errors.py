"""Error types raised by the shell integration layer.

Filesystem failures are not wrapped here; they surface as the builtin
``OSError`` raised by the failing call.
"""


class NotionError(Exception):
    """Base class for errors that should be shown to the user."""

    user_message = "An unexpected notion error occurred."

    def __init__(self, message: str = ""):
        super().__init__(message or self.user_message)


class UnspecifiedShell(NotionError):
    """NOTION_SHELL is not set, so the running shell is unknown."""

    user_message = (
        "Notion shell integration is not configured: NOTION_SHELL is not set. "
        "Re-run the notion installer or source its shell profile."
    )


class UnrecognizedShell(NotionError):
    """NOTION_SHELL names a shell family notion does not support."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unrecognized shell: {name!r}")


class UnspecifiedPostscript(NotionError):
    """NOTION_POSTSCRIPT is not set even though the shell is known."""

    user_message = (
        "Notion shell integration is incomplete: NOTION_POSTSCRIPT is not set."
    )


class InvalidToolName(NotionError, ValueError):
    """A tool name that cannot become an environment variable name."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(
            f"Invalid tool name {tool!r}: it must produce a valid "
            "environment variable name"
        )
