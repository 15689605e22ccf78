"""Path resolution helpers shared by the directory and file handles.

All functions are pure string manipulation and never touch the
filesystem. Paths are returned as absolute, normalized strings.
"""

from __future__ import annotations

import os
import re

__all__ = ["basename", "extension", "join", "normalize", "parent"]

_SEPARATORS = os.sep + (os.altsep or "")
_SEPARATOR_RUN = re.compile(f"[{re.escape(_SEPARATORS)}]+")


def _split(path: str | os.PathLike[str]) -> tuple[str, list[str]]:
    """Split a path into its drive and its non-empty segments."""
    text = os.fspath(path)
    if not os.path.isabs(text):
        text = os.getcwd() + os.sep + text
    drive, rest = os.path.splitdrive(text)
    return drive, [segment for segment in _SEPARATOR_RUN.split(rest) if segment]


def _build(drive: str, segments: list[str]) -> str:
    return drive + os.sep + os.sep.join(segments)


def normalize(path: str | os.PathLike[str]) -> str:
    """Return the absolute, normalized string form of a path.

    Runs of separators collapse to one and a trailing separator is
    dropped. "." and ".." segments are kept as given.

    Args:
        path: Absolute or relative path. Relative paths are resolved
            against the current working directory.

    Returns:
        Absolute path string.
    """
    return _build(*_split(path))


def join(base: str | os.PathLike[str], child: str) -> str:
    """Append a child specifier to a base path.

    The child may span several segments ("books/comics/DragonBall").
    Leading separators are stripped so the result always stays below
    ``base``.

    Args:
        base: Parent path.
        child: Relative name of the child.

    Returns:
        Absolute path string of the child.
    """
    return normalize(normalize(base) + os.sep + child.lstrip(_SEPARATORS))


def parent(path: str | os.PathLike[str]) -> str:
    """Strip the final segment of a path.

    The filesystem root is its own parent.
    """
    drive, segments = _split(path)
    return _build(drive, segments[:-1])


def basename(path: str | os.PathLike[str]) -> str:
    """Final segment of a path, extension included ("" for the root)."""
    _, segments = _split(path)
    return segments[-1] if segments else ""


def extension(path: str | os.PathLike[str]) -> str:
    """Text after the last "." of the basename, without the dot.

    Returns "" when the basename has no extension. A lone leading dot
    (".bashrc") does not start an extension, nor does a trailing one.
    """
    name = basename(path)
    dot = name.rfind(".")
    if 0 < dot < len(name) - 1:
        return name[dot + 1:]
    return ""
