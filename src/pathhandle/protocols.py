"""Protocol definitions for filesystem handles.

This module defines the capability interfaces shared by the real
(``existing``) and in-memory (``fake``) variants:

- ``Entry``: anything living at a path
- ``File``: a readable leaf entry
- ``Directory``: a container of entries
- ``FileSystem``: the OS primitives the real variant is built on

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class Entry(Protocol):
    """Protocol for a handle to something living at a path."""

    def as_string(self) -> str:
        """Return the path of the entry."""
        ...

    def is_file(self) -> bool:
        """Check if the entry is a file.

        Raises:
            StaleHandleError: If the entry was removed after the handle was obtained.
        """
        ...

    def is_directory(self) -> bool:
        """Check if the entry is a directory.

        Raises:
            StaleHandleError: If the entry was removed after the handle was obtained.
        """
        ...


@runtime_checkable
class File(Entry, Protocol):
    """Protocol for a readable leaf entry."""

    def load(self) -> str:
        """Read the full contents of the file.

        Returns:
            File content as string.

        Raises:
            StaleHandleError: If the file was removed after the handle was obtained.
            LoadError: If reading fails.
        """
        ...

    def load_bytes(self) -> bytes:
        """Read the full contents of the file as bytes."""
        ...

    def directory(self) -> Directory:
        """Return the directory containing the file.

        Raises:
            StaleHandleError: If the file was removed after the handle was obtained.
        """
        ...


@runtime_checkable
class Directory(Entry, Protocol):
    """Protocol for a container entry."""

    def exists(self, name: str) -> bool:
        """Check if a direct child with exactly this name is present."""
        ...

    def is_empty(self) -> bool:
        """Check if the directory has no direct children."""
        ...

    def create_file(self, name: str, content: str) -> File:
        """Create a child file.

        Args:
            name: Name of the new file.
            content: Content to write.

        Returns:
            Handle to the new file.

        Raises:
            EntryExistsError: If a child with that name already exists.
            FailedToCreateFileError: If writing fails.
        """
        ...

    def create_directory(self, name: str) -> Directory:
        """Create a child directory.

        Args:
            name: Name of the new directory.

        Returns:
            Handle to the new directory.

        Raises:
            EntryExistsError: If a child with that name already exists.
            FailedToCreateDirectoryError: If the OS refuses.
        """
        ...

    def delete_directory(self, name: str) -> None:
        """Remove a child directory and everything beneath it."""
        ...

    def delete_all_files(self) -> None:
        """Remove every direct child file, keeping subdirectories."""
        ...

    def delete_all_files_and_directories_recursively(self) -> None:
        """Remove the whole tree, depth-first, including this directory."""
        ...

    def all_files(self) -> list[Entry]:
        """List direct children, files and directories alike."""
        ...

    def all_files_recursively(self) -> list[File]:
        """List terminal files at every depth, pre-order."""
        ...

    def file(self, name: str) -> File:
        """Return the direct child file with this name."""
        ...

    def subdirectory(self, name: str) -> Directory:
        """Return the direct child directory with this name."""
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Abstracts OS access so the real variant can be tested with injected
    failures. Implementations raise ``OSError`` subclasses on failure.
    """

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def read_bytes(self, path: Path) -> bytes:
        """Read binary content from a file."""
        ...

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a new file, failing if it exists.

        Raises:
            FileExistsError: If the path already exists.
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        ...

    def rmdir(self, path: Path) -> None:
        """Remove an empty directory."""
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        ...

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link."""
        ...

    def iterdir(self, path: Path) -> Iterator[Path]:
        """Iterate over the immediate children of a directory."""
        ...
