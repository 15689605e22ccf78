"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the filesystem
boundary and for the handles built on top of it. Designing to interfaces
enables:
- Substituting test doubles for the real filesystem
- Treating directory and file handles uniformly where only the shared
  capabilities matter

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dirfile.types import FileAttributes, OperationResult


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Abstracts filesystem access to enable testing without real I/O.
    Implementations raise ``OSError`` subclasses on failure; the handles
    translate those into results.
    """

    def read_bytes(self, path: Path) -> bytes:
        """Read raw content from a file.

        Args:
            path: Path to the file.

        Returns:
            File content.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Write raw content to a file, replacing any previous content.

        Args:
            path: Path to the file.
            content: Content to write.
        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file.

        Args:
            path: Path to check.

        Returns:
            True if path is a regular file, False otherwise.
        """
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def touch(self, path: Path) -> None:
        """Create an empty file, or update the modification time of an existing one.

        Args:
            path: Path to the file.
        """
        ...

    def unlink(self, path: Path, missing_ok: bool = False) -> None:
        """Remove a file.

        Args:
            path: Path to remove.
            missing_ok: Don't raise if the file does not exist.
        """
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree.

        Args:
            path: Path to remove.
        """
        ...

    def iterdir(self, path: Path) -> Iterator[Path]:
        """Iterate over the immediate children of a directory.

        Args:
            path: Directory to list.

        Returns:
            Iterator of child paths, in filesystem order.
        """
        ...

    def stat(self, path: Path) -> os.stat_result:
        """Get OS metadata for a path.

        Args:
            path: Path to inspect.

        Returns:
            Result of the stat call.
        """
        ...


@runtime_checkable
class Entry(Protocol):
    """Capabilities shared by directory and file handles."""

    @property
    def path(self) -> str:
        """Absolute path wrapped by the handle."""
        ...

    @property
    def basename(self) -> str:
        """Final path segment."""
        ...

    @property
    def exists(self) -> bool:
        """True if the path currently denotes an entry of the handle's kind."""
        ...

    @property
    def is_dir(self) -> bool:
        """True for directory handles."""
        ...

    @property
    def attributes(self) -> FileAttributes | None:
        """OS metadata, or None if it cannot be read."""
        ...

    def remove(self) -> OperationResult:
        """Delete the entry from the filesystem."""
        ...
