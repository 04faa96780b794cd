"""Shared behaviour of all handles: path normalization, string conversion, equality."""

from __future__ import annotations

import os

SEPARATORS = "/" + (os.sep if os.sep != "/" else "")


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Strip trailing separators from a path.

    A path made only of separators (the filesystem root) is kept as a single
    separator.

    Args:
        path: Path string or path-like object.

    Returns:
        The normalized path string.
    """
    raw = os.fspath(path)
    stripped = raw.rstrip(SEPARATORS)
    if not stripped and raw:
        return raw[0]
    return stripped


def join_path(directory: str, name: str) -> str:
    """Join a directory path and a child name with a single separator."""
    if directory.endswith(tuple(SEPARATORS)):
        return f"{directory}{name}"
    return f"{directory}/{name}"


class BaseEntry:
    """Value-like reference to a path.

    Two handles are equal when they are of the same class and refer to the
    same normalized path. Handles hold no open resources.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = normalize_path(path)

    def as_string(self) -> str:
        """Return the path of the entry."""
        return self._path

    @property
    def name(self) -> str:
        """Last component of the path."""
        return os.path.basename(self._path) or self._path

    def __str__(self) -> str:
        return self._path

    def __fspath__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._path == other._path  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._path))
