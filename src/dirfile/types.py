"""Shared data types for dirfile."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

__all__ = ["FileAttributes", "FileType", "OperationResult"]

FileType = Literal["regular", "directory", "symlink", "other"]


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a mutating filesystem operation.

    Attributes:
        success: True if the operation succeeded.
        path: Path the operation acted on.
        value: Optional payload carried on success.
        error: Description of the OS error (None on success).
    """

    success: bool
    path: str
    value: Any = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.success and self.error is not None:
            raise ValueError("success=True but error is set")
        if not self.success and not self.error:
            raise ValueError("success=False requires error message")
        if not self.path:
            raise ValueError("path cannot be empty")

    @classmethod
    def ok(cls, path: str, value: Any = None) -> OperationResult:
        """Build a successful result."""
        return cls(success=True, path=path, value=value)

    @classmethod
    def fail(cls, path: str, error: str) -> OperationResult:
        """Build a failed result."""
        return cls(success=False, path=path, error=error)

    @property
    def is_success(self) -> bool:
        return self.success

    @property
    def is_failure(self) -> bool:
        return not self.success

    def value_or(self, default: Any) -> Any:
        """Return the payload on success, otherwise ``default``."""
        return self.value if self.success else default

    def __bool__(self) -> bool:
        return self.success


def _file_type(mode: int) -> FileType:
    if stat.S_ISREG(mode):
        return "regular"
    if stat.S_ISDIR(mode):
        return "directory"
    if stat.S_ISLNK(mode):
        return "symlink"
    return "other"


def _utc(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


class FileAttributes(BaseModel):
    """Snapshot of OS-reported metadata for a filesystem entry."""

    model_config = ConfigDict(frozen=True)

    posix_permissions: int
    file_type: FileType
    size: int
    modification_date: datetime
    access_date: datetime
    owner_id: int
    group_id: int
    inode: int
    link_count: int

    @classmethod
    def from_stat(cls, result: os.stat_result) -> FileAttributes:
        """Build attributes from an ``os.stat`` result.

        Args:
            result: Value returned by ``os.stat``/``Path.stat``.

        Returns:
            Parsed FileAttributes.
        """
        return cls(
            posix_permissions=stat.S_IMODE(result.st_mode),
            file_type=_file_type(result.st_mode),
            size=result.st_size,
            modification_date=_utc(result.st_mtime),
            access_date=_utc(result.st_atime),
            owner_id=result.st_uid,
            group_id=result.st_gid,
            inode=result.st_ino,
            link_count=result.st_nlink,
        )

    def file_posix_permissions(self) -> int:
        """Permission bits in octal-style integer form (e.g. 0o644)."""
        return self.posix_permissions
