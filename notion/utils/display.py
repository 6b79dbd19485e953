"""Rich console display helpers for Notion.

Status output goes to stderr so that stdout stays clean for ``--print``,
which emits postscript text meant to be piped or eval'd.
"""

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from notion.shell import Shell, ShellInfo


# Global console instance
console = Console(stderr=True)


def print_error(message: str, title: str = "Error") -> None:
    """Display error message.

    Args:
        message: Error message to display
        title: Panel title
    """
    console.print(
        Panel(
            f"[red]{escape(message)}[/red]",
            title=f"[bold red]{title}[/bold red]",
            border_style="red"
        )
    )


def print_success(message: str) -> None:
    """Display success message."""
    console.print(f"[green]✓[/green] {message}")


def print_info(message: str) -> None:
    """Display info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def print_postscript(text: str) -> None:
    """Write compiled postscript text to stdout, unstyled."""
    typer.echo(text, nl=False)


def print_postscript_preview(text: str, shell: Shell) -> None:
    """Show compiled postscript text highlighted for its shell."""
    console.print(
        Panel(
            Syntax(text.rstrip("\n"), shell.kind.value, theme="ansi_dark"),
            title=f"[bold]{shell.postscript_path}[/bold]",
            border_style="blue",
        )
    )


def print_shells_table(shells: list[ShellInfo]) -> None:
    """Display the supported shells in a table.

    Args:
        shells: Registered shell entries
    """
    table = Table(title="Supported Shells", show_header=True, header_style="bold cyan")
    table.add_column("Name", style="bold")
    table.add_column("Postscript", style="cyan")
    table.add_column("Description")

    for info in shells:
        table.add_row(info.name, info.postscript_filename, info.description)

    console.print(table)
