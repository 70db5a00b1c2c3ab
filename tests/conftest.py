"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

TreeBuilder = Callable[[Path, dict[str, str]], Path]


def _build_tree(root: Path, files: dict[str, str]) -> Path:
    """Create files (and their parent directories) under root.

    Args:
        root: Directory to create the tree in.
        files: Mapping of relative file path to file content.

    Returns:
        The root directory.
    """
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def make_tree() -> TreeBuilder:
    """Factory fixture that builds a directory tree from a path->content mapping."""
    return _build_tree


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    """Empty source directory."""
    root = tmp_path / "source"
    root.mkdir()
    return root


@pytest.fixture
def target_root(tmp_path: Path) -> Path:
    """Empty target directory."""
    root = tmp_path / "target"
    root.mkdir()
    return root
