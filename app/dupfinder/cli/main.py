"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from dupfinder import __version__
from dupfinder.cli.commands import config, find
from dupfinder.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="dupfinder",
    help="Find and move duplicate files based on exact file names.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dupfinder version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """dupfinder - find files that share a name across two directory trees.

    Duplicates are detected by file name only. Matching files can be
    moved from the source tree into the target tree, keeping their
    relative position.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    configure_logging(verbose=verbose, quiet=quiet)


# Register commands
app.add_typer(find.app, name="find")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
