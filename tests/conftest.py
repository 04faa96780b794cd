"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from pathhandle.existing import ExistingDirectory
from pathhandle.filesystem import RealFileSystem


@pytest.fixture
def test_directory(tmp_path: Path) -> ExistingDirectory:
    """Create an empty directory on disk and return its handle."""
    return ExistingDirectory.create(tmp_path / "test-directory")


@pytest.fixture
def testdata_directory(tmp_path: Path) -> Path:
    """Create the tree {1, 2, subdirectory/3} on disk."""
    root = tmp_path / "directory"
    (root / "subdirectory").mkdir(parents=True)
    (root / "1").write_text("one")
    (root / "2").write_text("two")
    (root / "subdirectory" / "3").write_text("three")
    return root


# ============================================================================
# Fault-Injecting FileSystem Doubles
# ============================================================================


class UnreadableFileSystem(RealFileSystem):
    """Real filesystem whose reads always fail."""

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        raise PermissionError(13, "Permission denied", str(path))

    def read_bytes(self, path: Path) -> bytes:
        raise PermissionError(13, "Permission denied", str(path))


class ReadOnlyFileSystem(RealFileSystem):
    """Real filesystem that refuses every change."""

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        raise PermissionError(13, "Permission denied", str(path))

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        raise PermissionError(13, "Permission denied", str(path))

    def unlink(self, path: Path) -> None:
        raise PermissionError(13, "Permission denied", str(path))

    def rmdir(self, path: Path) -> None:
        raise PermissionError(13, "Permission denied", str(path))

    def rmtree(self, path: Path) -> None:
        raise PermissionError(13, "Permission denied", str(path))


@pytest.fixture
def unreadable_filesystem() -> UnreadableFileSystem:
    """Filesystem backend whose reads fail."""
    return UnreadableFileSystem()


@pytest.fixture
def read_only_filesystem() -> ReadOnlyFileSystem:
    """Filesystem backend whose writes and deletes fail."""
    return ReadOnlyFileSystem()
