"""Base handle implementation with shared behavior.

Directory and file handles share path normalization, naming, metadata
lookup and the translation of OS errors into results. They vary in how
they test for existence and how they are created and removed.

Pattern: Template Method - base class owns the error handling skeleton,
subclasses provide the concrete filesystem calls.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from dirfile import paths
from dirfile.protocols import FileSystem
from dirfile.types import FileAttributes, OperationResult

logger = logging.getLogger(__name__)


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from dirfile.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass(frozen=True)
class BaseEntry(ABC):
    """Immutable handle wrapping an absolute path.

    The path is normalized at construction and never changes. The
    filesystem is injected so tests can substitute a double; it takes no
    part in equality or hashing.
    """

    path: str
    fs: FileSystem = field(
        default_factory=_default_filesystem, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        """Normalize the wrapped path."""
        if not isinstance(self.path, (str, os.PathLike)):
            raise TypeError(f"path must be str or PathLike, got {type(self.path).__name__}")
        object.__setattr__(self, "path", paths.normalize(self.path))

    @property
    @abstractmethod
    def exists(self) -> bool:
        """True if the path denotes an entry of this handle's kind."""
        ...

    @property
    @abstractmethod
    def is_dir(self) -> bool:
        """True for directory handles."""
        ...

    @abstractmethod
    def remove(self) -> OperationResult:
        """Delete the entry."""
        ...

    @property
    def basename(self) -> str:
        """Final path segment."""
        return paths.basename(self.path)

    @property
    def as_string(self) -> str:
        """The wrapped path, as a string."""
        return self.path

    @property
    def attributes(self) -> FileAttributes | None:
        """OS metadata at call time, or None if the path cannot be stat'ed."""
        try:
            return FileAttributes.from_stat(self.fs.stat(self._fs_path))
        except (OSError, ValueError) as e:
            logger.debug("stat failed for %s: %s", self.path, e)
            return None

    @property
    def _fs_path(self) -> Path:
        return Path(self.path)

    def _check(self, predicate: Callable[[Path], bool]) -> bool:
        """Run an existence check, reporting inaccessible paths as absent."""
        try:
            return predicate(self._fs_path)
        except (OSError, ValueError) as e:
            logger.debug("existence check failed for %s: %s", self.path, e)
            return False

    def _perform(self, operation: str, action: Callable[[], object]) -> OperationResult:
        """Run a mutating filesystem call and capture its outcome.

        Args:
            operation: Name of the operation, for logging.
            action: Callable doing the filesystem work. Its return value
                becomes the payload of a successful result.

        Returns:
            OperationResult describing success or the OS error.
        """
        try:
            value = action()
        except (OSError, ValueError) as e:
            logger.exception("%s failed for %s", operation, self.path)
            return OperationResult.fail(self.path, str(e) or type(e).__name__)
        logger.debug("%s succeeded for %s", operation, self.path)
        return OperationResult.ok(self.path, value)

    def __fspath__(self) -> str:
        return self.path

    def __str__(self) -> str:
        return self.path
