"""Tree snapshots: export a directory to JSON or YAML and rebuild it elsewhere.

Snapshots work on any ``Directory`` implementation, so a real directory can
be captured and replayed into a ``FakeDirectory`` for tests, or the other way
around.
"""

from __future__ import annotations

import json
import logging
import os
from enum import Enum

import yaml
from pydantic import BaseModel, ConfigDict, Field

from pathhandle.protocols import Directory, File

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = "1.0"


class SnapshotFormat(str, Enum):
    """Serialization formats for snapshots."""

    JSON = "json"
    YAML = "yaml"


class FileNode(BaseModel):
    """A file and its content."""

    name: str
    content: str = ""


class DirectoryNode(BaseModel):
    """A directory with its files and subdirectories."""

    name: str
    files: list[FileNode] = Field(default_factory=list)
    directories: list[DirectoryNode] = Field(default_factory=list)

    def file_count(self) -> int:
        """Count files at every depth."""
        return len(self.files) + sum(d.file_count() for d in self.directories)


DirectoryNode.model_rebuild()


class TreeSnapshot(BaseModel):
    """A captured directory tree."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = SNAPSHOT_VERSION
    path: str = Field(alias="rootPath")
    root: DirectoryNode


def _basename(path: str) -> str:
    return os.path.basename(path) or path


def _capture(directory: Directory, seen: set[str]) -> DirectoryNode:
    node = DirectoryNode(name=_basename(directory.as_string()))
    seen.add(os.path.realpath(directory.as_string()))
    for entry in directory.all_files():
        if entry.is_directory():
            # A link back into the captured tree would recurse forever.
            if os.path.realpath(entry.as_string()) in seen:
                continue
            node.directories.append(_capture(entry, seen))  # type: ignore[arg-type]
        else:
            file: File = entry  # type: ignore[assignment]
            node.files.append(
                FileNode(name=_basename(file.as_string()), content=file.load())
            )
    return node


def take_snapshot(directory: Directory) -> TreeSnapshot:
    """Capture the tree below a directory.

    Args:
        directory: Directory to capture.

    Returns:
        TreeSnapshot with every file's content.

    Raises:
        StaleHandleError: If the directory or an entry vanishes during the walk.
        LoadError: If a file cannot be read.
    """
    return TreeSnapshot(path=directory.as_string(), root=_capture(directory, set()))


def _replay(node: DirectoryNode, directory: Directory) -> None:
    for file in node.files:
        directory.create_file(file.name, file.content)
    for child in node.directories:
        _replay(child, directory.create_directory(child.name))


def restore_snapshot(snapshot: TreeSnapshot, directory: Directory) -> None:
    """Recreate a snapshot's content inside a directory.

    Existing entries are never overwritten: a name collision stops the
    restore with ``EntryExistsError`` and leaves what was already written.

    Args:
        snapshot: Tree to recreate.
        directory: Target directory; the snapshot root's children land here.
    """
    _replay(snapshot.root, directory)
    logger.debug(
        "Restored %d files from %s into %s",
        snapshot.root.file_count(),
        snapshot.path,
        directory.as_string(),
    )


def dump_snapshot(
    snapshot: TreeSnapshot, fmt: SnapshotFormat = SnapshotFormat.JSON
) -> str:
    """Serialize a snapshot to JSON or YAML text."""
    data = snapshot.model_dump(by_alias=True)
    if fmt == SnapshotFormat.YAML:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False)


def load_snapshot(text: str, fmt: SnapshotFormat = SnapshotFormat.JSON) -> TreeSnapshot:
    """Parse a snapshot from JSON or YAML text.

    Raises:
        ValueError: If the text is not a valid snapshot.
    """
    try:
        data = yaml.safe_load(text) if fmt == SnapshotFormat.YAML else json.loads(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML snapshot: {e}") from e
    return TreeSnapshot.model_validate(data)
