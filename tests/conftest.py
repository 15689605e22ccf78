"""Shared test fixtures."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dirfile import Dir


@pytest.fixture
def sandbox(tmp_path: Path) -> Dir:
    """Create an empty sandbox directory handle."""
    sandbox_dir = Dir(tmp_path).subdir("sandbox")
    sandbox_dir.mkdir()
    return sandbox_dir


@pytest.fixture
def default_umask() -> Iterator[int]:
    """Pin the process umask to 022 for permission assertions."""
    previous = os.umask(0o022)
    try:
        yield 0o022
    finally:
        os.umask(previous)


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory and clear root overrides for testing."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    for name in (
        "DIRFILE_TEMPORARY_DIR",
        "DIRFILE_HOME_DIR",
        "DIRFILE_DOCUMENTS_DIR",
        "DIRFILE_CACHE_DIR",
        "XDG_DOCUMENTS_DIR",
        "XDG_CACHE_HOME",
        "LOCALAPPDATA",
    ):
        monkeypatch.delenv(name, raising=False)
    return home


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.is_dir.return_value = False
    fs.is_file.return_value = False
    fs.read_bytes.return_value = b""
    fs.iterdir.return_value = iter([])
    return fs
