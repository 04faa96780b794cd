"""Filesystem abstraction for testability.

This module provides the OS-backed implementation of the FileSystem
protocol. It is the only place that touches the disk; handles in
``pathhandle.existing`` go through it, so tests can inject failures.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterator


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        return path.read_text(encoding=encoding)

    def read_bytes(self, path: Path) -> bytes:
        """Read binary content from a file."""
        return path.read_bytes()

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a new file.

        Opens in exclusive mode so an existing file is never overwritten.
        A file whose content could not be written is removed again.
        """
        handle = path.open("x", encoding=encoding)
        try:
            with handle:
                handle.write(content)
        except (OSError, UnicodeEncodeError):
            path.unlink(missing_ok=True)
            raise

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link."""
        return path.is_symlink()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        path.unlink()

    def rmdir(self, path: Path) -> None:
        """Remove an empty directory."""
        path.rmdir()

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)

    def iterdir(self, path: Path) -> Iterator[Path]:
        """Iterate over the immediate children of a directory."""
        return path.iterdir()
