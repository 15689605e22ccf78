"""File handle."""

from __future__ import annotations

import errno
import logging
import os
from dataclasses import dataclass

from dirfile import paths
from dirfile.dir import Dir
from dirfile.entry import BaseEntry
from dirfile.types import OperationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class File(BaseEntry):
    """Handle for a file path.

    Writes and ``touch`` create missing parent directories. Reads return
    None instead of raising; use ``exists`` to tell a missing file apart
    from one that could not be read or decoded.
    """

    @property
    def extension(self) -> str:
        """Text after the last "." of the basename ("" if none)."""
        return paths.extension(self.path)

    @property
    def dir(self) -> Dir:
        """Directory containing this file."""
        return Dir(paths.parent(self.path), fs=self.fs)

    @property
    def exists(self) -> bool:
        """True if the path is an existing regular file."""
        return self._check(self.fs.is_file)

    @property
    def is_dir(self) -> bool:
        """Always False for file handles."""
        return False

    def touch(self) -> OperationResult:
        """Create an empty file, or bump the modification time of an existing one.

        Existing content is left untouched.
        """
        def action() -> None:
            if self.fs.is_dir(self._fs_path):
                raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), self.path)
            self._ensure_parent()
            self.fs.touch(self._fs_path)

        return self._perform("touch", action)

    def remove(self) -> OperationResult:
        """Delete the file. Succeeds when nothing exists at the path."""
        return self._perform(
            "remove", lambda: self.fs.unlink(self._fs_path, missing_ok=True)
        )

    def write_data(self, data: bytes) -> OperationResult:
        """Replace the file content with raw bytes.

        Args:
            data: Content to write.

        Returns:
            OperationResult with the number of bytes written as value.
        """
        def action() -> int:
            self._ensure_parent()
            self.fs.write_bytes(self._fs_path, bytes(data))
            return len(data)

        return self._perform("write_data", action)

    def read_data(self) -> bytes | None:
        """Read the raw file content, or None if it cannot be read."""
        try:
            return self.fs.read_bytes(self._fs_path)
        except (OSError, ValueError) as e:
            logger.debug("read failed for %s: %s", self.path, e)
            return None

    def write_string(self, text: str, encoding: str = "utf-8") -> OperationResult:
        """Replace the file content with encoded text.

        Args:
            text: Content to write.
            encoding: Text encoding, UTF-8 by default.

        Returns:
            OperationResult with the number of bytes written as value.
        """
        try:
            data = text.encode(encoding)
        except UnicodeEncodeError as e:
            logger.exception("write_string failed for %s", self.path)
            return OperationResult.fail(self.path, str(e))
        return self.write_data(data)

    def read_string(self, encoding: str = "utf-8") -> str | None:
        """Read and decode the file content.

        Returns:
            Decoded text, or None if the file is missing, unreadable or
            not valid in the given encoding.
        """
        data = self.read_data()
        if data is None:
            return None
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            logger.debug("decode failed for %s: %s", self.path, e)
            return None

    def _ensure_parent(self) -> None:
        parent = self._fs_path.parent
        if not self.fs.is_dir(parent):
            self.fs.mkdir(parent, parents=True, exist_ok=True)
