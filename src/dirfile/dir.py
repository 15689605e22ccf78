"""Directory handle."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dirfile import paths, roots
from dirfile.entry import BaseEntry
from dirfile.types import OperationResult

if TYPE_CHECKING:
    from dirfile.file import File

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dir(BaseEntry):
    """Handle for a directory path.

    Navigation (``subdir``, ``file``, ``parent``) is pure path composition
    and returns new handles. Only ``mkdir``, ``remove``, ``exists``,
    ``contents`` and iteration touch the filesystem.

    Example:
        >>> books = Dir("/tmp/sandbox").subdir("books")
        >>> books.file("comics/DragonBall").path
        '/tmp/sandbox/books/comics/DragonBall'
    """

    # Well-known roots

    @classmethod
    def temporary_dir(cls) -> Dir:
        """Handle for the platform temporary directory."""
        return cls(roots.temporary_dir())

    @classmethod
    def home_dir(cls) -> Dir:
        """Handle for the user's home directory."""
        return cls(roots.home_dir())

    @classmethod
    def documents_dir(cls) -> Dir:
        """Handle for the user's documents directory."""
        return cls(roots.documents_dir())

    @classmethod
    def cache_dir(cls) -> Dir:
        """Handle for the per-user cache directory."""
        return cls(roots.cache_dir())

    # Navigation

    def subdir(self, name: str) -> Dir:
        """Get a handle for a directory below this one.

        Args:
            name: Relative name, possibly spanning several segments.

        Returns:
            New Dir handle. Nothing is created.
        """
        return Dir(paths.join(self.path, name), fs=self.fs)

    def file(self, name: str) -> File:
        """Get a handle for a file below this directory.

        Args:
            name: Relative name, possibly spanning several segments.

        Returns:
            New File handle. Nothing is created.
        """
        from dirfile.file import File
        return File(paths.join(self.path, name), fs=self.fs)

    @property
    def parent(self) -> Dir:
        """Containing directory. The root is its own parent."""
        return Dir(paths.parent(self.path), fs=self.fs)

    # Filesystem access

    @property
    def exists(self) -> bool:
        """True if the path is an existing directory."""
        return self._check(self.fs.is_dir)

    @property
    def is_dir(self) -> bool:
        """Always True for directory handles."""
        return True

    def mkdir(self) -> OperationResult:
        """Create the directory and any missing ancestors.

        Returns:
            Success if the directory exists afterwards, failure with the
            OS error otherwise (e.g. a file is in the way).
        """
        return self._perform(
            "mkdir", lambda: self.fs.mkdir(self._fs_path, parents=True, exist_ok=True)
        )

    def remove(self) -> OperationResult:
        """Delete the directory and everything below it.

        Returns:
            Success, also when nothing existed at the path. Failure with
            the OS error otherwise, including when the path is a file.
        """
        return self._perform("remove", self._remove_tree)

    def _remove_tree(self) -> None:
        path = self._fs_path
        if not self.fs.is_dir(path) and not self.fs.is_file(path):
            return
        self.fs.rmtree(path)

    @property
    def contents(self) -> list[Dir | File]:
        """Immediate children, each wrapped by the kind the OS reports.

        Order follows the filesystem and is not guaranteed. A missing or
        unreadable directory has no contents.
        """
        from dirfile.file import File

        try:
            children = list(self.fs.iterdir(self._fs_path))
        except (OSError, ValueError) as e:
            logger.debug("listing failed for %s: %s", self.path, e)
            return []

        entries: list[Dir | File] = []
        for child in children:
            if self.fs.is_dir(child):
                entries.append(Dir(child, fs=self.fs))
            else:
                entries.append(File(child, fs=self.fs))
        return entries

    def __iter__(self) -> Iterator[Dir | File]:
        return iter(self.contents)
