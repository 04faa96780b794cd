"""Tests for filesystem abstraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from pathhandle.filesystem import RealFileSystem
from pathhandle.protocols import FileSystem


class TestRealFileSystem:
    """Tests for RealFileSystem implementation."""

    def test_satisfies_protocol(self) -> None:
        """Test RealFileSystem structurally satisfies the FileSystem protocol."""
        assert isinstance(RealFileSystem(), FileSystem)

    def test_read_text(self, tmp_path: Path) -> None:
        """Test reading text content from a file."""
        fs = RealFileSystem()
        test_file = tmp_path / "test.txt"
        test_file.write_text("Hello, World!", encoding="utf-8")

        content = fs.read_text(test_file)

        assert content == "Hello, World!"

    def test_read_text_not_found(self, tmp_path: Path) -> None:
        """Test reading a non-existent file raises FileNotFoundError."""
        fs = RealFileSystem()

        with pytest.raises(FileNotFoundError):
            fs.read_text(tmp_path / "missing.txt")

    def test_read_bytes(self, tmp_path: Path) -> None:
        """Test reading binary content from a file."""
        fs = RealFileSystem()
        test_file = tmp_path / "data.bin"
        test_file.write_bytes(b"\x00\x01")

        assert fs.read_bytes(test_file) == b"\x00\x01"

    def test_write_text(self, tmp_path: Path) -> None:
        """Test writing text content to a new file."""
        fs = RealFileSystem()
        test_file = tmp_path / "output.txt"

        fs.write_text(test_file, "Test content")

        assert test_file.read_text(encoding="utf-8") == "Test content"

    def test_write_text_never_overwrites(self, tmp_path: Path) -> None:
        """Test writing to an existing file raises FileExistsError and keeps content."""
        fs = RealFileSystem()
        test_file = tmp_path / "output.txt"
        test_file.write_text("original")

        with pytest.raises(FileExistsError):
            fs.write_text(test_file, "replacement")

        assert test_file.read_text() == "original"

    def test_write_text_removes_file_on_encode_failure(self, tmp_path: Path) -> None:
        """Test a file whose content cannot be encoded is not left behind."""
        fs = RealFileSystem()
        test_file = tmp_path / "output.txt"

        with pytest.raises(UnicodeEncodeError):
            fs.write_text(test_file, "café", encoding="ascii")

        assert not test_file.exists()

    def test_exists(self, tmp_path: Path) -> None:
        """Test exists for existing and missing paths."""
        fs = RealFileSystem()
        test_file = tmp_path / "exists.txt"
        test_file.touch()

        assert fs.exists(test_file) is True
        assert fs.exists(tmp_path / "missing.txt") is False

    def test_is_dir(self, tmp_path: Path) -> None:
        """Test classification of files and directories."""
        fs = RealFileSystem()
        test_file = tmp_path / "file.txt"
        test_file.touch()

        assert fs.is_dir(tmp_path) is True
        assert fs.is_dir(test_file) is False
        assert fs.is_dir(tmp_path / "missing") is False

    def test_is_symlink(self, tmp_path: Path) -> None:
        """Test is_symlink detects links but not their targets."""
        fs = RealFileSystem()
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        try:
            link.symlink_to(target, target_is_directory=True)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported")

        assert fs.is_symlink(link) is True
        assert fs.is_symlink(target) is False

    def test_mkdir(self, tmp_path: Path) -> None:
        """Test creating simple and nested directories."""
        fs = RealFileSystem()

        fs.mkdir(tmp_path / "newdir")
        fs.mkdir(tmp_path / "a" / "b" / "c", parents=True)

        assert (tmp_path / "newdir").is_dir()
        assert (tmp_path / "a" / "b" / "c").is_dir()

    def test_mkdir_raises_without_exist_ok(self, tmp_path: Path) -> None:
        """Test mkdir raises FileExistsError without exist_ok."""
        fs = RealFileSystem()
        existing_dir = tmp_path / "existing"
        existing_dir.mkdir()

        with pytest.raises(FileExistsError):
            fs.mkdir(existing_dir, exist_ok=False)

        fs.mkdir(existing_dir, exist_ok=True)

    def test_unlink(self, tmp_path: Path) -> None:
        """Test removing a file."""
        fs = RealFileSystem()
        test_file = tmp_path / "to_delete.txt"
        test_file.touch()

        fs.unlink(test_file)

        assert not test_file.exists()

    def test_rmdir_requires_empty_directory(self, tmp_path: Path) -> None:
        """Test rmdir removes empty directories only."""
        fs = RealFileSystem()
        full = tmp_path / "full"
        full.mkdir()
        (full / "file").touch()
        empty = tmp_path / "empty"
        empty.mkdir()

        fs.rmdir(empty)

        assert not empty.exists()
        with pytest.raises(OSError):
            fs.rmdir(full)

    def test_rmtree(self, tmp_path: Path) -> None:
        """Test removing a directory tree."""
        fs = RealFileSystem()
        tree_dir = tmp_path / "tree"
        (tree_dir / "subdir").mkdir(parents=True)
        (tree_dir / "file1.txt").touch()
        (tree_dir / "subdir" / "file2.txt").touch()

        fs.rmtree(tree_dir)

        assert not tree_dir.exists()

    def test_iterdir(self, testdata_directory: Path) -> None:
        """Test listing immediate children only."""
        fs = RealFileSystem()

        names = sorted(child.name for child in fs.iterdir(testdata_directory))

        assert names == ["1", "2", "subdirectory"]
