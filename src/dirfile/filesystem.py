"""Filesystem abstraction for testability.

This module provides a filesystem abstraction that enables testing
without real I/O operations. The RealFileSystem implementation
wraps standard library operations.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterator
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path, os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def read_bytes(self, path: Path) -> bytes:
        """Read raw content from a file."""
        return path.read_bytes()

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Write raw content to a file."""
        path.write_bytes(content)

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        return path.is_file()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def touch(self, path: Path) -> None:
        """Create a file or bump its modification time."""
        path.touch(exist_ok=True)

    def unlink(self, path: Path, missing_ok: bool = False) -> None:
        """Remove a file."""
        path.unlink(missing_ok=missing_ok)

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)

    def iterdir(self, path: Path) -> Iterator[Path]:
        """List the immediate children of a directory."""
        return path.iterdir()

    def stat(self, path: Path) -> os.stat_result:
        """Get OS metadata for a path."""
        return path.stat()
