"""Find command implementation.

Lists files in the source tree whose names also exist in the target
tree and, with --execute, moves them into the target tree.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dupfinder.core.config import ConfigError, FinderConfig, load_config
from dupfinder.core.finder import DuplicateFinder
from dupfinder.core.models import MatchRecord, MoveResult, ScanReadError
from dupfinder.utils.formatting import (
    console,
    create_match_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Find and move duplicate files from source to target directory.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options for the match list."""

    TABLE = "table"
    JSON = "json"


def _confirm_move(file_count: int, *, stderr: bool = False) -> bool:
    """Prompt user to confirm the move.

    Args:
        file_count: Number of files to be moved.
        stderr: Write the prompt to stderr instead of stdout.

    Returns:
        True if user confirms, False otherwise.
    """
    return typer.confirm(
        f"\nAre you sure you want to move {file_count} files?",
        default=False,
        err=stderr,
    )


@app.callback(invoke_without_command=True)
def find_duplicates(
    ctx: typer.Context,
    source: Annotated[
        Path,
        typer.Option(
            "--source",
            "-s",
            help="Source directory to scan (duplicates will be moved from here).",
        ),
    ],
    target: Annotated[
        Path,
        typer.Option(
            "--target",
            "-t",
            help="Target directory to scan for duplicates and move files to.",
        ),
    ],
    execute: Annotated[
        bool,
        typer.Option(
            "--execute",
            "-e",
            help="Move the duplicate files (default is dry-run).",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip confirmation prompt.",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format for the match list.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Find files in SOURCE whose names also exist in TARGET.

    Matching is by file name only; contents are never compared. Each
    match would be moved to the same relative position under TARGET
    that it has under SOURCE.

    Examples:
        dupfinder find -s ~/old-backup -t ~/photos             # Preview
        dupfinder find -s ~/old-backup -t ~/photos --execute   # Move
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        config = load_config()
    except ConfigError as e:
        print_error(f"Failed to load config: {escape(str(e))}")
        raise typer.Exit(code=1) from e

    # In JSON mode stdout carries only the match list; notices go to stderr
    as_json = output_format == OutputFormat.JSON

    finder = DuplicateFinder(source, target, policy=config.ignore_policy())
    duplicates = finder.find_duplicates()

    _report_scan_errors(finder.scan_errors)

    if as_json:
        console.print_json(json.dumps([d.to_dict() for d in duplicates]))
    elif duplicates:
        console.print(_create_duplicates_table(duplicates))
        console.print(f"\n[dim]Found {len(duplicates)} duplicate file(s)[/dim]")

    if not duplicates:
        print_info("No duplicate files found.", stderr=as_json)
        return

    if not execute:
        print_info("\nDRY RUN: No files were moved.", stderr=as_json)
        print_info(
            "To actually move these files, run the command with --execute flag",
            stderr=as_json,
        )
        return

    if not _should_proceed(config, yes, len(duplicates), stderr=as_json):
        print_info("Operation cancelled by user.", stderr=as_json)
        raise typer.Exit(code=0)

    out = err_console if as_json else console
    out.print(
        "\n[bold]Executing move of duplicate files from source to target directory...[/bold]\n"
    )
    results = finder.move_duplicates()
    _print_move_results(results, out)
    print_success("Done!", stderr=as_json)

    if any(not r.success for r in results):
        raise typer.Exit(code=1)


# === Private helper functions ===


def _should_proceed(config: FinderConfig, yes: bool, file_count: int, *, stderr: bool) -> bool:
    """Decide whether to move without asking, or ask the user."""
    if yes or config.assume_yes:
        return True
    return _confirm_move(file_count, stderr=stderr)


def _create_duplicates_table(duplicates: list[MatchRecord]) -> Table:
    """Build the numbered match table."""
    table = create_match_table()
    for index, dup in enumerate(duplicates, 1):
        table.add_row(
            str(index),
            escape(dup.source_path),
            escape(dup.target_path),
            escape(dup.new_path),
        )
    return table


def _report_scan_errors(errors: list[ScanReadError]) -> None:
    """Summarize paths skipped because they could not be read.

    Each failure is already logged with its path by the scanner.
    """
    if not errors:
        return
    noun = "path" if len(errors) == 1 else "paths"
    print_warning(f"Skipped {len(errors)} unreadable {noun}.")


def _print_move_results(results: list[MoveResult], out: Console) -> None:
    """Print one line per moved file and a summary."""
    for r in results:
        if r.success:
            out.print(f"[success]Moved[/] {escape(r.source_path)} -> {escape(r.new_path)}")
        else:
            detail = escape(r.error or "unknown error")
            print_error(f"Could not move {escape(r.source_path)}: {detail}")

    moved = sum(1 for r in results if r.success)
    failed = len(results) - moved
    summary = f"\n[dim]Moved {moved} file(s)"
    if failed:
        summary += f", {failed} failed"
    out.print(summary + "[/dim]")
