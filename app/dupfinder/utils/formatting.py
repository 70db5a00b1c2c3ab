"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from dupfinder.core.theme import THEME


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Route library logging to stderr through Rich.

    Args:
        verbose: Show debug and per-file messages.
        quiet: Show errors only. Ignored when verbose is set.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, markup=False)],
        force=True,
    )


def create_match_table(title: str = "Duplicate Files") -> Table:
    """Create a pre-configured table for displaying match records.

    Args:
        title: Table title.

    Returns:
        Rich Table with index, source, target, and destination columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("#", justify="right", style="muted", width=4)
    table.add_column("Source (will be moved)", style="source", overflow="fold")
    table.add_column("Target (reference)", style="target", overflow="fold")
    table.add_column("New location", style="destination", overflow="fold")
    return table


def print_info(message: str, *, stderr: bool = False) -> None:
    """Print an info message."""
    (err_console if stderr else console).print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str, *, stderr: bool = False) -> None:
    """Print a success message."""
    (err_console if stderr else console).print(f"[success]{message}[/]")
