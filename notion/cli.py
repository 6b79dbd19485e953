"""Command-line interface for Notion using Typer.

These commands are thin wrappers over the shell integration layer: each
builds a postscript intent, detects the shell and writes the postscript the
shell will source when the command returns.
"""

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from notion import __version__
from notion.config import NotionConfig
from notion.errors import NotionError
from notion.shell import (
    Activate,
    Deactivate,
    Postscript,
    ShellRegistry,
    ToolVersion,
    detect,
)
from notion.utils import display

app = typer.Typer(
    name="notion",
    help="Shell integration for the notion toolchain manager",
    add_completion=False,
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        display.console.print(f"Notion version {__version__}")
        raise typer.Exit()


def load_config() -> NotionConfig:
    """Load the config file and environment, exiting on invalid values."""
    try:
        return NotionConfig.load_from_file()
    except ValueError as e:
        display.print_error(str(e), title="Configuration Error")
        raise typer.Exit(code=1)


def setup_logging(debug: bool) -> None:
    """Send notion's log records to the console when debugging."""
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=display.console, show_path=False)],
    )


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging"
    ),
):
    """Notion - shell integration for the notion toolchain manager."""
    setup_logging(debug or load_config().debug)


def _emit(postscript: Postscript, print_only: bool) -> None:
    """Detect the shell, then print or save the postscript."""
    try:
        shell = detect(load_config())
        if print_only:
            display.print_postscript(shell.compile_postscript(postscript))
            return
        path = shell.save_postscript(postscript)
    except NotionError as e:
        display.print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        display.print_error(str(e), title="I/O Error")
        raise typer.Exit(code=1)

    display.print_success(f"Postscript written to {path}")


@app.command(name="activate")
def activate_command(
    home_path: str = typer.Argument(
        ...,
        help="PATH value with the notion shims enabled"
    ),
    print_only: bool = typer.Option(
        False,
        "--print",
        help="Print the postscript instead of writing it"
    ),
):
    """Write a postscript that turns the notion toolchain on.

    Examples:
        notion activate "$HOME/.notion/bin:$PATH"
    """
    _emit(Activate(home_path), print_only)


@app.command(name="deactivate")
def deactivate_command(
    restored_path: str = typer.Argument(
        ...,
        help="PATH value with the notion entries removed"
    ),
    print_only: bool = typer.Option(
        False,
        "--print",
        help="Print the postscript instead of writing it"
    ),
):
    """Write a postscript that turns the notion toolchain off.

    Examples:
        notion deactivate /usr/local/bin:/usr/bin:/bin
    """
    _emit(Deactivate(restored_path), print_only)


@app.command(name="use")
def use_command(
    tool: str = typer.Argument(..., help="Tool name, e.g. node"),
    version: str = typer.Argument(..., help="Semantic version, e.g. 16.2.0"),
    print_only: bool = typer.Option(
        False,
        "--print",
        help="Print the postscript instead of writing it"
    ),
):
    """Write a postscript that selects a tool version for this shell.

    Examples:
        notion use node 16.2.0
    """
    try:
        postscript = ToolVersion.parse(tool, version)
    except ValueError as e:
        display.print_error(str(e))
        raise typer.Exit(code=1)

    _emit(postscript, print_only)


@app.command(name="detect")
def detect_command():
    """Show the detected shell and where its postscript is written."""
    try:
        shell = detect(load_config())
    except NotionError as e:
        display.print_error(str(e))
        raise typer.Exit(code=1)

    display.console.print(f"  Shell: [cyan]{shell.kind.value}[/cyan]")
    display.console.print(f"  Postscript: [cyan]{shell.postscript_path}[/cyan]")


@app.command(name="shells")
def shells_command():
    """List the supported shells."""
    display.print_shells_table(ShellRegistry().get_all())


@app.command(name="preview")
def preview_command(
    tool: str = typer.Argument(..., help="Tool name, e.g. node"),
    version: str = typer.Argument(..., help="Semantic version, e.g. 16.2.0"),
):
    """Show the postscript `notion use` would write, highlighted."""
    try:
        postscript = ToolVersion.parse(tool, version)
        shell = detect(load_config())
    except (NotionError, ValueError) as e:
        display.print_error(str(e))
        raise typer.Exit(code=1)

    display.print_postscript_preview(shell.compile_postscript(postscript), shell)


@app.command(name="config")
def config_command(
    show: bool = typer.Option(
        False,
        "--show",
        help="Show current configuration"
    ),
    escape_quotes: Optional[bool] = typer.Option(
        None,
        "--escape-quotes/--no-escape-quotes",
        help="Escape single quotes in postscript path values"
    ),
):
    """Manage Notion configuration.

    Examples:
        notion config --show
        notion config --escape-quotes
    """
    config = load_config()

    if escape_quotes is not None:
        config.escape_quotes = escape_quotes
        try:
            config.save_to_file()
        except OSError as e:
            display.print_error(str(e), title="I/O Error")
            raise typer.Exit(code=1)
        display.print_success(f"Set escape_quotes to {escape_quotes}")

    if show or escape_quotes is None:
        display.print_info("Current Configuration:")
        display.console.print(f"  Shell: [cyan]{config.shell or '(not set)'}[/cyan]")
        display.console.print(f"  Postscript Dir: [cyan]{config.postscript or '(not set)'}[/cyan]")
        display.console.print(f"  Escape Quotes: [cyan]{config.escape_quotes}[/cyan]")
        display.console.print(f"  Debug Mode: [cyan]{config.debug}[/cyan]")
        display.console.print(f"  Config File: [cyan]{config.config_path}[/cyan]")


if __name__ == "__main__":
    app()
