"""Directory and file handles over the native filesystem."""

__version__ = "0.1.0"

from dirfile.dir import Dir
from dirfile.file import File
from dirfile.filesystem import RealFileSystem
from dirfile.protocols import Entry, FileSystem
from dirfile.roots import WellKnownRoots
from dirfile.types import FileAttributes, OperationResult

__all__ = [
    "__version__",
    "Dir",
    "Entry",
    "File",
    "FileAttributes",
    "FileSystem",
    "OperationResult",
    "RealFileSystem",
    "WellKnownRoots",
]
