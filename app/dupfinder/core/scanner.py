"""Recursive directory scanner.

Walks a directory tree depth-first and collects the absolute paths of
every non-directory entry, pruning anything rejected by the ignore
policy. Unreadable directories are reported and skipped so that one
bad subtree never aborts the whole scan.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from dupfinder.core.ignore import IgnorePolicy
from dupfinder.core.models import ScanReadError

logger = logging.getLogger(__name__)

ScanErrorHandler = Callable[[ScanReadError], None]


class TreeScanner:
    """Enumerates files under a root directory.

    Siblings are visited in sorted name order.

    Args:
        policy: Ignore rules to apply. Defaults to the built-in policy.
        on_error: Optional callback invoked once per path that could
            not be read.
    """

    def __init__(
        self,
        policy: IgnorePolicy | None = None,
        on_error: ScanErrorHandler | None = None,
    ) -> None:
        self._policy = policy or IgnorePolicy()
        self._on_error = on_error

    @property
    def policy(self) -> IgnorePolicy:
        """Ignore rules used by this scanner."""
        return self._policy

    def scan(self, root: str | Path) -> list[str]:
        """Scan a directory tree and return absolute file paths.

        A missing or unreadable root yields an empty list. This method
        does not raise for per-directory failures.

        Args:
            root: Directory to scan. Relative paths are made absolute.

        Returns:
            Absolute paths of all non-ignored, non-directory entries.
        """
        files: list[str] = []
        self._scan_directory(Path(root).absolute(), files)
        return files

    def _scan_directory(self, directory: Path, files: list[str]) -> None:
        """Collect files from one directory, recursing into subdirectories.

        Entry types come from the directory listing itself, so children
        of a listable but non-searchable directory are still classified.

        Args:
            directory: Directory to list.
            files: Accumulator for collected file paths.
        """
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            self._report(directory, e)
            return

        for entry in entries:
            path = directory / entry.name
            if self._policy.should_ignore(entry.name):
                logger.debug("Ignoring %s", path)
                continue

            # Symlinks are collected as files, never followed
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                self._report(path, e, kind="entry")
                continue

            if is_dir:
                self._scan_directory(path, files)
            else:
                files.append(str(path))

    def _report(self, path: Path, error: OSError, kind: str = "directory") -> None:
        """Log a read failure and pass it to the error handler."""
        logger.warning("Error reading %s %s: %s", kind, path, error)
        if self._on_error is not None:
            self._on_error(ScanReadError(path=str(path), error=str(error)))
