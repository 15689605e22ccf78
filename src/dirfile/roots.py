"""Well-known root directories.

Each root is looked up from the platform and the environment on demand.
Lookups never create anything on disk.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

from pydantic import BaseModel, ConfigDict

__all__ = [
    "ENV_PREFIX",
    "WellKnownRoots",
    "cache_dir",
    "documents_dir",
    "home_dir",
    "temporary_dir",
]

# Explicit per-root overrides, e.g. DIRFILE_CACHE_DIR=/var/cache/app
ENV_PREFIX = "DIRFILE_"


def _override(name: str) -> Path | None:
    value = os.environ.get(f"{ENV_PREFIX}{name.upper()}_DIR")
    return Path(value) if value else None


def temporary_dir() -> Path:
    """Get the temporary directory.

    Honours TMPDIR/TEMP/TMP through ``tempfile``.
    """
    return _override("temporary") or Path(tempfile.gettempdir())


def home_dir() -> Path:
    """Get the current user's home directory."""
    return _override("home") or Path.home()


def documents_dir() -> Path:
    """Get the user's documents directory.

    Uses XDG_DOCUMENTS_DIR when set, otherwise ~/Documents.
    """
    override = _override("documents")
    if override is not None:
        return override
    xdg = os.environ.get("XDG_DOCUMENTS_DIR")
    if xdg:
        return Path(xdg)
    return home_dir() / "Documents"


def cache_dir() -> Path:
    """Get the per-user cache directory.

    Returns:
        Platform-specific path: XDG_CACHE_HOME when set, ~/Library/Caches
        on macOS, LOCALAPPDATA on Windows, ~/.cache elsewhere.
    """
    override = _override("cache")
    if override is not None:
        return override
    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg)
    if sys.platform == "darwin":
        return home_dir() / "Library" / "Caches"
    if sys.platform == "win32":
        local = os.environ.get("LOCALAPPDATA")
        return Path(local) if local else home_dir() / "AppData" / "Local"
    return home_dir() / ".cache"


class WellKnownRoots(BaseModel):
    """Resolved set of well-known root directories."""

    model_config = ConfigDict(frozen=True)

    temporary: Path
    home: Path
    documents: Path
    cache: Path

    @classmethod
    def from_environment(cls) -> WellKnownRoots:
        """Resolve every root from the current platform and environment.

        Returns:
            WellKnownRoots with absolute paths.
        """
        return cls(
            temporary=temporary_dir().absolute(),
            home=home_dir().absolute(),
            documents=documents_dir().absolute(),
            cache=cache_dir().absolute(),
        )
