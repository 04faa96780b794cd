"""Entry point: turn a path string into a file or directory handle."""

from __future__ import annotations

import os
from pathlib import Path

from pathhandle.entry import normalize_path
from pathhandle.exceptions import DoesNotExistError
from pathhandle.existing import DEFAULT_ENCODING, ExistingDirectory, ExistingFile
from pathhandle.filesystem import RealFileSystem
from pathhandle.protocols import FileSystem


def resolve(
    path: str | os.PathLike[str],
    filesystem: FileSystem | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> ExistingFile | ExistingDirectory:
    """Return a handle for whatever exists at ``path``.

    Trailing separators are stripped before the lookup.

    Args:
        path: Path to inspect.
        filesystem: Filesystem backend. Defaults to RealFileSystem.
        encoding: Text encoding passed on to the handle.

    Returns:
        ExistingDirectory for a directory, ExistingFile for anything else.

    Raises:
        DoesNotExistError: If nothing exists at ``path``.
    """
    fs = filesystem or RealFileSystem()
    normalized = normalize_path(path)
    target = Path(normalized)
    if fs.is_dir(target):
        return ExistingDirectory(normalized, fs, encoding)
    if fs.exists(target):
        return ExistingFile(normalized, fs, encoding)
    raise DoesNotExistError(normalized)
