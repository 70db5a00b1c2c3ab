"""Name-based ignore rules applied while scanning directory trees.

An entry is ignored when its name is on the denylist, starts with a
dot (hidden files and directories), or ends with a tilde (editor
backup files). Ignored directories are never descended into.
"""

from collections.abc import Iterable
from dataclasses import dataclass

# Names skipped regardless of the dot/tilde rules
DEFAULT_IGNORED_NAMES: frozenset[str] = frozenset(
    {
        ".DS_Store",
        "Thumbs.db",
        ".git",
        ".gitignore",
        ".svn",
        ".idea",
        ".vscode",
    }
)


@dataclass(frozen=True, slots=True)
class IgnorePolicy:
    """Immutable set of rules deciding which entries a scan skips.

    Attributes:
        names: Exact entry names to skip.
    """

    names: frozenset[str] = DEFAULT_IGNORED_NAMES

    def should_ignore(self, name: str) -> bool:
        """Check whether a file or directory name is excluded.

        Args:
            name: Entry name (final path component, not a full path).

        Returns:
            True if the entry must be skipped.
        """
        return name in self.names or name.startswith(".") or name.endswith("~")

    def with_names(self, extra: Iterable[str]) -> "IgnorePolicy":
        """Return a new policy that also ignores the given names.

        The built-in rules are always kept; extra names can only add to them.
        """
        return IgnorePolicy(names=self.names | frozenset(extra))
