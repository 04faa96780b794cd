"""In-memory stand-ins for the real handles.

A ``FakeDirectory`` owns a tree of fake entries keyed by child name, in
insertion order. Nothing here ever touches the disk, so the root path does
not need to exist. Entries removed through the tree (``delete_directory``,
``delete_all_files``, the recursive delete) turn stale like real handles.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from pathhandle.entry import BaseEntry, join_path
from pathhandle.exceptions import (
    DirectoryDoesNotExistError,
    EntryExistsError,
    FileDoesNotExistError,
    StaleHandleError,
)
from pathhandle.protocols import Entry

if TYPE_CHECKING:
    from pathhandle.snapshot import TreeSnapshot

__all__ = ["FakeDirectory", "FakeFile"]


class _FakeEntry(BaseEntry):
    """Common state of fake entries: the owning directory and a removed flag."""

    def __init__(
        self, path: str | os.PathLike[str], parent: FakeDirectory | None = None
    ) -> None:
        super().__init__(path)
        self._parent = parent
        self._removed = False

    def _ensure_present(self) -> None:
        if self._removed:
            raise StaleHandleError(self._path)

    def _mark_removed(self) -> None:
        self._removed = True


class FakeFile(_FakeEntry):
    """A file whose content lives in memory."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        content: str = "",
        parent: FakeDirectory | None = None,
    ) -> None:
        super().__init__(path, parent)
        self._content = content

    def is_file(self) -> bool:
        self._ensure_present()
        return True

    def is_directory(self) -> bool:
        self._ensure_present()
        return False

    def load(self) -> str:
        self._ensure_present()
        return self._content

    def load_bytes(self) -> bytes:
        self._ensure_present()
        return self._content.encode("utf-8")

    def directory(self) -> FakeDirectory:
        """Return the owning fake directory.

        A file created without an owner gets a fresh, empty fake directory
        for its parent path.
        """
        self._ensure_present()
        if self._parent is not None:
            return self._parent
        return FakeDirectory(os.path.dirname(self._path) or ".")


class FakeDirectory(_FakeEntry):
    """A directory whose children live in memory.

    Example:
        >>> root = FakeDirectory("/does/not/exist")
        >>> root.create_file("a.txt", "hello").load()
        'hello'
    """

    def __init__(
        self, path: str | os.PathLike[str] = "/", parent: FakeDirectory | None = None
    ) -> None:
        super().__init__(path, parent)
        self._children: dict[str, FakeFile | FakeDirectory] = {}

    @classmethod
    def from_snapshot(
        cls, snapshot: TreeSnapshot, path: str | os.PathLike[str] | None = None
    ) -> FakeDirectory:
        """Build an in-memory tree from a snapshot.

        Args:
            snapshot: Tree to reproduce.
            path: Root path of the fake. Defaults to the snapshot's root path.
        """
        from pathhandle.snapshot import restore_snapshot

        directory = cls(path if path is not None else snapshot.path)
        restore_snapshot(snapshot, directory)
        return directory

    def _child_path(self, name: str) -> str:
        return join_path(self._path, name)

    def _mark_removed(self) -> None:
        for child in self._children.values():
            child._mark_removed()
        self._children.clear()
        super()._mark_removed()

    def is_file(self) -> bool:
        self._ensure_present()
        return False

    def is_directory(self) -> bool:
        self._ensure_present()
        return True

    def exists(self, name: str) -> bool:
        self._ensure_present()
        return name in self._children

    def is_empty(self) -> bool:
        self._ensure_present()
        return not self._children

    def create_file(self, name: str, content: str) -> FakeFile:
        self._ensure_present()
        if name in self._children:
            raise EntryExistsError(self._child_path(name))
        file = FakeFile(self._child_path(name), content, parent=self)
        self._children[name] = file
        return file

    def create_directory(self, name: str) -> FakeDirectory:
        self._ensure_present()
        if name in self._children:
            raise EntryExistsError(self._child_path(name))
        directory = FakeDirectory(self._child_path(name), parent=self)
        self._children[name] = directory
        return directory

    def delete_directory(self, name: str) -> None:
        self._ensure_present()
        child = self._children.get(name)
        if not isinstance(child, FakeDirectory):
            raise DirectoryDoesNotExistError(self._child_path(name))
        del self._children[name]
        child._mark_removed()

    def delete_all_files(self) -> None:
        self._ensure_present()
        for name, child in list(self._children.items()):
            if isinstance(child, FakeFile):
                del self._children[name]
                child._mark_removed()

    def delete_all_files_and_directories_recursively(self) -> None:
        """Empty the tree and detach this directory from its owner."""
        self._ensure_present()
        if self._parent is not None:
            self._parent._children.pop(self.name, None)
        self._mark_removed()

    def all_files(self) -> list[Entry]:
        self._ensure_present()
        return list(self._children.values())

    def all_files_recursively(self) -> list[FakeFile]:
        self._ensure_present()
        files: list[FakeFile] = []
        for child in self._children.values():
            if isinstance(child, FakeDirectory):
                files.extend(child.all_files_recursively())
            else:
                files.append(child)
        return files

    def file(self, name: str) -> FakeFile:
        self._ensure_present()
        child = self._children.get(name)
        if not isinstance(child, FakeFile):
            raise FileDoesNotExistError(self._child_path(name))
        return child

    def subdirectory(self, name: str) -> FakeDirectory:
        self._ensure_present()
        child = self._children.get(name)
        if not isinstance(child, FakeDirectory):
            raise DirectoryDoesNotExistError(self._child_path(name))
        return child
