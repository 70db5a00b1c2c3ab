"""Core scanning, matching, and moving logic for dupfinder.

This package contains the directory scanner, the name-matching engine,
and the mover that relocates matched files into the target tree.
"""

from dupfinder.core.finder import DuplicateFinder
from dupfinder.core.ignore import DEFAULT_IGNORED_NAMES, IgnorePolicy
from dupfinder.core.models import MatchRecord, MoveResult, ScanReadError
from dupfinder.core.mover import FileMover
from dupfinder.core.scanner import TreeScanner

__all__ = [
    "DEFAULT_IGNORED_NAMES",
    "DuplicateFinder",
    "FileMover",
    "IgnorePolicy",
    "MatchRecord",
    "MoveResult",
    "ScanReadError",
    "TreeScanner",
]
