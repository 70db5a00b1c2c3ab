"""Relocation of matched source files into the target tree.

Each record is moved independently: failures are captured as
unsuccessful results and the batch continues. Nothing is rolled back.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from dupfinder.core.models import MatchRecord, MoveResult

logger = logging.getLogger(__name__)


class FileMover:
    """Moves matched files from the source tree to their new paths.

    There is no dry-run mode: every call performs real moves.
    """

    def move(self, records: Iterable[MatchRecord]) -> list[MoveResult]:
        """Move every record's source file to its new path, in order.

        Args:
            records: Match records to process.

        Returns:
            List of MoveResult, one per input record.
        """
        return [self._move_single(record) for record in records]

    def _move_single(self, record: MatchRecord) -> MoveResult:
        """Create the destination directory and rename one file.

        ``Path.replace`` is used so an existing file at the new path is
        overwritten on every platform, as a POSIX rename would. Moves
        across filesystems fail with the platform's error.

        Args:
            record: Match record to move.

        Returns:
            MoveResult indicating success or failure.
        """
        source = Path(record.source_path)
        destination = Path(record.new_path)

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            source.replace(destination)
        except OSError as e:
            logger.error("Error moving file %s -> %s: %s", source, destination, e)
            return MoveResult(
                source_path=record.source_path,
                new_path=record.new_path,
                success=False,
                error=str(e),
            )

        logger.info("Moved file: %s -> %s", source, destination)
        return MoveResult(
            source_path=record.source_path,
            new_path=record.new_path,
            success=True,
        )
