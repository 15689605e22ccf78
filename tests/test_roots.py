"""Tests for well-known root directories."""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from dirfile import roots
from dirfile.roots import WellKnownRoots


class TestTemporaryDir:
    """Tests for temporary_dir."""

    def test_matches_tempfile(self, temp_home: Path) -> None:
        """Test the temporary root follows tempfile."""
        assert roots.temporary_dir() == Path(tempfile.gettempdir())

    def test_override(self, temp_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test DIRFILE_TEMPORARY_DIR overrides the platform value."""
        monkeypatch.setenv("DIRFILE_TEMPORARY_DIR", "/scratch")

        assert roots.temporary_dir() == Path("/scratch")


class TestHomeDir:
    """Tests for home_dir."""

    def test_home(self, temp_home: Path) -> None:
        """Test the home root follows Path.home."""
        assert roots.home_dir() == temp_home

    def test_override(self, temp_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test DIRFILE_HOME_DIR overrides Path.home."""
        monkeypatch.setenv("DIRFILE_HOME_DIR", "/users/other")

        assert roots.home_dir() == Path("/users/other")


class TestDocumentsDir:
    """Tests for documents_dir."""

    def test_default(self, temp_home: Path) -> None:
        """Test documents default to ~/Documents."""
        assert roots.documents_dir() == temp_home / "Documents"

    def test_xdg(self, temp_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test XDG_DOCUMENTS_DIR is honoured."""
        monkeypatch.setenv("XDG_DOCUMENTS_DIR", "/data/Documents")

        assert roots.documents_dir() == Path("/data/Documents")

    def test_override_beats_xdg(
        self, temp_home: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test DIRFILE_DOCUMENTS_DIR wins over XDG_DOCUMENTS_DIR."""
        monkeypatch.setenv("XDG_DOCUMENTS_DIR", "/data/Documents")
        monkeypatch.setenv("DIRFILE_DOCUMENTS_DIR", "/srv/docs")

        assert roots.documents_dir() == Path("/srv/docs")

    def test_lookup_does_not_create(self, temp_home: Path) -> None:
        """Test resolving the root leaves the filesystem alone."""
        roots.documents_dir()

        assert not (temp_home / "Documents").exists()


class TestCacheDir:
    """Tests for cache_dir."""

    @patch.object(sys, "platform", "linux")
    def test_linux(self, temp_home: Path) -> None:
        """Test Linux cache directory."""
        assert roots.cache_dir() == temp_home / ".cache"

    @patch.object(sys, "platform", "darwin")
    def test_darwin(self, temp_home: Path) -> None:
        """Test macOS cache directory."""
        assert roots.cache_dir() == temp_home / "Library" / "Caches"

    @patch.object(sys, "platform", "win32")
    def test_windows_localappdata(
        self, temp_home: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test Windows cache directory from LOCALAPPDATA."""
        monkeypatch.setenv("LOCALAPPDATA", "/appdata/local")

        assert roots.cache_dir() == Path("/appdata/local")

    @patch.object(sys, "platform", "win32")
    def test_windows_fallback(self, temp_home: Path) -> None:
        """Test Windows cache directory without LOCALAPPDATA."""
        assert roots.cache_dir() == temp_home / "AppData" / "Local"

    @patch.object(sys, "platform", "darwin")
    def test_xdg_wins(self, temp_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test XDG_CACHE_HOME is honoured on every platform."""
        monkeypatch.setenv("XDG_CACHE_HOME", "/var/cache/user")

        assert roots.cache_dir() == Path("/var/cache/user")


class TestWellKnownRoots:
    """Tests for WellKnownRoots model."""

    @patch.object(sys, "platform", "linux")
    def test_from_environment(self, temp_home: Path) -> None:
        """Test every root is resolved."""
        resolved = WellKnownRoots.from_environment()

        assert resolved.home == temp_home
        assert resolved.documents == temp_home / "Documents"
        assert resolved.cache == temp_home / ".cache"
        assert resolved.temporary == Path(tempfile.gettempdir()).absolute()
