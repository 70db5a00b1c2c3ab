"""CLI commands for dupfinder.

This package contains all subcommand implementations.
"""

from dupfinder.cli.commands import config, find

__all__ = ["config", "find"]
