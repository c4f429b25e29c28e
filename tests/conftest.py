"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Source tree with nested directories and empty files.

    Layout::

        src/
            a.txt
            x/
                y.txt
                z/
            b/
    """
    src = tmp_path / "src"
    (src / "x" / "z").mkdir(parents=True)
    (src / "b").mkdir()
    (src / "a.txt").touch()
    (src / "x" / "y.txt").touch()
    return src


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty directory set as the current working directory."""
    dest = tmp_path / "dest"
    dest.mkdir()
    monkeypatch.chdir(dest)
    return dest
