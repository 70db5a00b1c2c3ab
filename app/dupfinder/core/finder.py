"""Name-based duplicate detection between a source and a target tree.

The finder scans both trees, indexes target files by base name, and
walks the source files in scan order looking each name up. Every hit
becomes a MatchRecord whose new path mirrors the source file's
position under the target root.
"""

import logging
from pathlib import Path

from dupfinder.core.ignore import IgnorePolicy
from dupfinder.core.models import MatchRecord, MoveResult, ScanReadError
from dupfinder.core.mover import FileMover
from dupfinder.core.scanner import TreeScanner

logger = logging.getLogger(__name__)


class DuplicateFinder:
    """Finds and moves files that share a base name across two trees.

    Both roots are resolved to absolute paths at construction; the
    filesystem is not touched until find_duplicates() is called.

    Args:
        source_dir: Tree that duplicates are moved out of.
        target_dir: Tree that is searched for names and moved into.
        policy: Ignore rules for both scans. Defaults to the built-in policy.
        mover: Mover to use. Defaults to a FileMover.
    """

    def __init__(
        self,
        source_dir: str | Path,
        target_dir: str | Path,
        *,
        policy: IgnorePolicy | None = None,
        mover: FileMover | None = None,
    ) -> None:
        self.source_dir = Path(source_dir).resolve()
        self.target_dir = Path(target_dir).resolve()
        self._scanner = TreeScanner(policy=policy, on_error=self._record_scan_error)
        self._mover = mover or FileMover()
        self._duplicates: list[MatchRecord] = []
        self._scan_errors: list[ScanReadError] = []

    @property
    def duplicates(self) -> list[MatchRecord]:
        """Match records from the most recent find_duplicates() call."""
        return list(self._duplicates)

    @property
    def scan_errors(self) -> list[ScanReadError]:
        """Directories that could not be read during the most recent scan."""
        return list(self._scan_errors)

    def find_duplicates(self) -> list[MatchRecord]:
        """Scan both trees and return source files whose name exists in the target.

        Replaces any previously computed match list. When several target
        files share a base name, the first one in scan order is the one
        every matching source file is paired with.

        Returns:
            Match records in source scan order.
        """
        self._duplicates = []
        self._scan_errors = []

        source_files = self._scanner.scan(self.source_dir)
        target_files = self._scanner.scan(self.target_dir)

        # First occurrence wins; later target files with the same name are shadowed
        target_index: dict[str, str] = {}
        for target_file in target_files:
            target_index.setdefault(Path(target_file).name, target_file)

        for source_file in source_files:
            target_file = target_index.get(Path(source_file).name)
            if target_file is None:
                continue

            relative = Path(source_file).relative_to(self.source_dir)
            self._duplicates.append(
                MatchRecord(
                    source_path=source_file,
                    target_path=target_file,
                    new_path=str(self.target_dir / relative),
                )
            )

        logger.debug(
            "Matched %d of %d source files against %d target files",
            len(self._duplicates),
            len(source_files),
            len(target_files),
        )
        return self.duplicates

    def move_duplicates(self) -> list[MoveResult]:
        """Move the most recently found duplicates into the target tree.

        Does nothing if find_duplicates() was never called or found no
        matches. Per-file failures are returned, not raised.

        Returns:
            List of MoveResult, one per match record.
        """
        return self._mover.move(self._duplicates)

    def _record_scan_error(self, error: ScanReadError) -> None:
        self._scan_errors.append(error)
