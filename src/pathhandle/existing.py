"""Handles backed by the real filesystem.

Presence is re-checked on every call: the entry behind a handle can be
removed by someone else at any time, and an operation on such a handle
raises ``StaleHandleError``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pathhandle.entry import BaseEntry, join_path
from pathhandle.exceptions import (
    DeleteError,
    DirectoryDoesNotExistError,
    EntryExistsError,
    FailedToCreateDirectoryError,
    FailedToCreateFileError,
    FileDoesNotExistError,
    LoadError,
    StaleHandleError,
)
from pathhandle.filesystem import RealFileSystem
from pathhandle.protocols import Entry, FileSystem

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class ExistingFile(BaseEntry):
    """Handle to a file on disk."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        filesystem: FileSystem | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Initialize the handle.

        Args:
            path: Path of the file.
            filesystem: Filesystem backend. Defaults to RealFileSystem.
            encoding: Text encoding used by ``load``.

        Note:
            Prefer ``from_path()``, which checks that the file exists.
        """
        super().__init__(path)
        self.fs = filesystem or RealFileSystem()
        self.encoding = encoding

    @classmethod
    def from_path(
        cls,
        path: str | os.PathLike[str],
        filesystem: FileSystem | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> ExistingFile:
        """Wrap an existing file.

        Raises:
            FileDoesNotExistError: If there is no file at ``path``.
        """
        file = cls(path, filesystem, encoding)
        if not file._present():
            raise FileDoesNotExistError(file.as_string())
        return file

    def _present(self) -> bool:
        path = Path(self._path)
        return self.fs.exists(path) and not self.fs.is_dir(path)

    def _ensure_present(self) -> Path:
        if not self._present():
            raise StaleHandleError(self._path)
        return Path(self._path)

    def is_file(self) -> bool:
        self._ensure_present()
        return True

    def is_directory(self) -> bool:
        self._ensure_present()
        return False

    def load(self) -> str:
        """Read the whole file as text.

        Raises:
            StaleHandleError: If the file was removed after the handle was obtained.
            LoadError: If the read fails.
        """
        path = self._ensure_present()
        try:
            return self.fs.read_text(path, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Reading %s failed: %s", path, e)
            raise LoadError(self._path) from e

    def load_bytes(self) -> bytes:
        """Read the whole file as bytes."""
        path = self._ensure_present()
        try:
            return self.fs.read_bytes(path)
        except OSError as e:
            logger.debug("Reading %s failed: %s", path, e)
            raise LoadError(self._path) from e

    def directory(self) -> ExistingDirectory:
        """Return the directory containing the file.

        Raises:
            StaleHandleError: If the file was removed after the handle was obtained.
        """
        path = self._ensure_present()
        return ExistingDirectory(path.parent, self.fs, self.encoding)


class ExistingDirectory(BaseEntry):
    """Handle to a directory on disk."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        filesystem: FileSystem | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Initialize the handle.

        Args:
            path: Path of the directory.
            filesystem: Filesystem backend. Defaults to RealFileSystem.
            encoding: Text encoding for files created or loaded below this directory.

        Note:
            Prefer ``from_path()`` or ``create()`` for construction.
        """
        super().__init__(path)
        self.fs = filesystem or RealFileSystem()
        self.encoding = encoding

    @classmethod
    def create(
        cls,
        path: str | os.PathLike[str],
        filesystem: FileSystem | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> ExistingDirectory:
        """Create a root directory, including missing parents.

        An already existing directory is accepted as is.

        Raises:
            FailedToCreateDirectoryError: If the OS refuses, or a non-directory
                occupies the path.
        """
        directory = cls(path, filesystem, encoding)
        try:
            directory.fs.mkdir(Path(directory.as_string()), parents=True, exist_ok=True)
        except OSError as e:
            logger.debug("Creating %s failed: %s", directory, e)
            raise FailedToCreateDirectoryError(directory.as_string()) from e
        logger.debug("Created directory %s", directory)
        return directory

    @classmethod
    def from_path(
        cls,
        path: str | os.PathLike[str],
        filesystem: FileSystem | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> ExistingDirectory:
        """Wrap an existing directory.

        Raises:
            DirectoryDoesNotExistError: If there is no directory at ``path``.
        """
        directory = cls(path, filesystem, encoding)
        if not directory.fs.is_dir(Path(directory.as_string())):
            raise DirectoryDoesNotExistError(directory.as_string())
        return directory

    def _ensure_present(self) -> Path:
        path = Path(self._path)
        if not self.fs.is_dir(path):
            raise StaleHandleError(self._path)
        return path

    def _child_path(self, name: str) -> Path:
        return Path(join_path(self._path, name))

    def _children(self) -> list[Path]:
        path = self._ensure_present()
        return sorted(self.fs.iterdir(path), key=lambda child: child.name)

    def _occupied(self, path: Path) -> bool:
        """True if anything, including a dangling link, holds the name."""
        return self.fs.exists(path) or self.fs.is_symlink(path)

    def _is_subdirectory(self, path: Path) -> bool:
        """True for real subdirectories; links to directories do not count."""
        return self.fs.is_dir(path) and not self.fs.is_symlink(path)

    def _entry(self, path: Path) -> ExistingFile | ExistingDirectory:
        if self.fs.is_dir(path):
            return ExistingDirectory(path, self.fs, self.encoding)
        return ExistingFile(path, self.fs, self.encoding)

    def is_file(self) -> bool:
        self._ensure_present()
        return False

    def is_directory(self) -> bool:
        self._ensure_present()
        return True

    def exists(self, name: str) -> bool:
        self._ensure_present()
        return self._occupied(self._child_path(name))

    def is_empty(self) -> bool:
        return not self._children()

    def create_file(self, name: str, content: str) -> ExistingFile:
        """Create a file with the given content.

        Raises:
            EntryExistsError: If a child with that name already exists.
            FailedToCreateFileError: If the OS refuses to write the file, or the
                content cannot be encoded. No partial file is left behind.
        """
        self._ensure_present()
        path = self._child_path(name)
        if self._occupied(path):
            raise EntryExistsError(str(path))
        try:
            self.fs.write_text(path, content, encoding=self.encoding)
        except FileExistsError as e:
            raise EntryExistsError(str(path)) from e
        except (OSError, UnicodeEncodeError) as e:
            logger.debug("Writing %s failed: %s", path, e)
            raise FailedToCreateFileError(str(path)) from e
        logger.debug("Created file %s", path)
        return ExistingFile(path, self.fs, self.encoding)

    def create_directory(self, name: str) -> ExistingDirectory:
        """Create a subdirectory.

        Raises:
            EntryExistsError: If a child with that name already exists.
            FailedToCreateDirectoryError: If the OS refuses.
        """
        self._ensure_present()
        path = self._child_path(name)
        if self._occupied(path):
            raise EntryExistsError(str(path))
        try:
            self.fs.mkdir(path)
        except FileExistsError as e:
            raise EntryExistsError(str(path)) from e
        except OSError as e:
            logger.debug("Creating %s failed: %s", path, e)
            raise FailedToCreateDirectoryError(str(path)) from e
        logger.debug("Created directory %s", path)
        return ExistingDirectory(path, self.fs, self.encoding)

    def delete_directory(self, name: str) -> None:
        """Remove a subdirectory and everything beneath it.

        Raises:
            DirectoryDoesNotExistError: If there is no such subdirectory.
            DeleteError: If the OS refuses.
        """
        self._ensure_present()
        path = self._child_path(name)
        if not self.fs.is_dir(path):
            raise DirectoryDoesNotExistError(str(path))
        if self.fs.is_symlink(path):
            self._unlink(path)
            return
        try:
            self.fs.rmtree(path)
        except OSError as e:
            raise DeleteError(str(path)) from e
        logger.debug("Deleted directory %s", path)

    def _unlink(self, path: Path) -> None:
        try:
            self.fs.unlink(path)
        except OSError as e:
            raise DeleteError(str(path)) from e
        logger.debug("Deleted file %s", path)

    def delete_all_files(self) -> None:
        """Remove every file directly inside the directory. Subdirectories stay."""
        for path in self._children():
            if not self.fs.is_dir(path):
                self._unlink(path)

    def delete_all_files_and_directories_recursively(self) -> None:
        """Remove the directory with everything beneath it, depth-first.

        The handle is stale afterwards. A failure stops the walk and leaves
        the tree partially deleted.
        """
        for path in self._children():
            if self._is_subdirectory(path):
                ExistingDirectory(
                    path, self.fs, self.encoding
                ).delete_all_files_and_directories_recursively()
            else:
                self._unlink(path)
        try:
            self.fs.rmdir(Path(self._path))
        except OSError as e:
            raise DeleteError(self._path) from e
        logger.debug("Deleted directory %s", self._path)

    def all_files(self) -> list[Entry]:
        """List files and subdirectories directly inside the directory."""
        return [self._entry(path) for path in self._children()]

    def all_files_recursively(self) -> list[ExistingFile]:
        """List the files at every depth below the directory.

        Links to directories are not followed, so every file is visited once
        even when a link points back at an ancestor.
        """
        files: list[ExistingFile] = []
        for path in self._children():
            if self._is_subdirectory(path):
                files.extend(
                    ExistingDirectory(path, self.fs, self.encoding).all_files_recursively()
                )
            elif not self.fs.is_dir(path):
                files.append(ExistingFile(path, self.fs, self.encoding))
        return files

    def file(self, name: str) -> ExistingFile:
        """Return the file ``name`` inside the directory.

        Raises:
            FileDoesNotExistError: If there is no such file.
        """
        self._ensure_present()
        path = self._child_path(name)
        if not self.fs.exists(path) or self.fs.is_dir(path):
            raise FileDoesNotExistError(str(path))
        return ExistingFile(path, self.fs, self.encoding)

    def subdirectory(self, name: str) -> ExistingDirectory:
        """Return the subdirectory ``name``.

        Raises:
            DirectoryDoesNotExistError: If there is no such subdirectory.
        """
        self._ensure_present()
        path = self._child_path(name)
        if not self.fs.is_dir(path):
            raise DirectoryDoesNotExistError(str(path))
        return ExistingDirectory(path, self.fs, self.encoding)
