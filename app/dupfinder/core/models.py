"""Data structures shared by the scanner, finder, and mover.

All records are immutable. Paths are stored as absolute path strings,
matching what the scanner produces.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """A source file whose base name also exists in the target tree.

    Attributes:
        source_path: Absolute path of the matched file under the source root.
        target_path: Absolute path of the first target file with the same name.
        new_path: Destination of the move, i.e. the source file's position
            relative to the source root, re-rooted under the target root.
            This does not have to coincide with ``target_path``.
    """

    source_path: str
    target_path: str
    new_path: str

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not self.source_path or not self.target_path or not self.new_path:
            msg = "MatchRecord paths cannot be empty"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, str]:
        """Serialize the record for JSON output."""
        return {
            "source_path": self.source_path,
            "target_path": self.target_path,
            "new_path": self.new_path,
        }


@dataclass(frozen=True, slots=True)
class ScanReadError:
    """A directory that could not be listed during a scan.

    Attributes:
        path: Absolute path of the directory.
        error: Error message from the failed listing.
    """

    path: str
    error: str


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of moving a single matched file.

    Attributes:
        source_path: Path the file was moved from.
        new_path: Path the file was moved to.
        success: Whether the move completed.
        error: Error message if the move failed, None otherwise.
    """

    source_path: str
    new_path: str
    success: bool
    error: str | None = None
