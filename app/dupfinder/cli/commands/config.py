"""Configuration commands.

Shows the effective settings and writes a default config file.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from dupfinder.core.config import ConfigError, FinderConfig, load_config, save_config
from dupfinder.core.ignore import DEFAULT_IGNORED_NAMES
from dupfinder.core.paths import get_config_path
from dupfinder.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize dupfinder configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config_path = get_config_path()
    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    source = str(config_path) if config_path.exists() else "defaults (no config file)"

    table = Table(title="dupfinder configuration", show_header=True, header_style="bold_header")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("Loaded from", escape(source))
    table.add_row("Built-in ignored names", escape(", ".join(sorted(DEFAULT_IGNORED_NAMES))))
    table.add_row(
        "Extra ignored names",
        escape(", ".join(config.extra_ignored_names)) or "-",
    )
    table.add_row("Assume yes", "yes" if config.assume_yes else "no")
    console.print(table)
    console.print("[dim]Names starting with '.' or ending with '~' are always ignored.[/dim]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default config file."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Config already exists: {escape(str(config_path))}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(FinderConfig(), config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {escape(str(saved))}")
