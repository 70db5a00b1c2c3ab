"""CLI package for dupfinder.

This package contains the Typer application and all subcommands.
"""

from dupfinder.cli.main import app

__all__ = ["app"]
