"""Tests for the resolve entry point."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pathhandle import resolve
from pathhandle.exceptions import DoesNotExistError
from pathhandle.existing import ExistingDirectory, ExistingFile


class TestResolve:
    """Tests for resolve()."""

    def test_can_be_created_from_file(self) -> None:
        """Test a file path resolves to an ExistingFile."""
        assert isinstance(resolve(__file__), ExistingFile)

    def test_can_be_created_from_directory(self, tmp_path: Path) -> None:
        """Test a directory path resolves to an ExistingDirectory."""
        assert isinstance(resolve(tmp_path), ExistingDirectory)

    def test_directory_can_have_trailing_slash(self, tmp_path: Path) -> None:
        """Test a trailing separator is stripped before resolving."""
        directory = resolve(f"{tmp_path}/")

        assert isinstance(directory, ExistingDirectory)
        assert directory.as_string() == str(tmp_path)

    def test_exception_when_file_or_directory_does_not_exist(self) -> None:
        """Test a missing path raises DoesNotExistError naming the path."""
        with pytest.raises(
            DoesNotExistError, match='File or directory "/does-not-exist" does not exist'
        ):
            resolve("/does-not-exist")

    def test_missing_path_trailing_slash_is_normalized_in_message(self, tmp_path: Path) -> None:
        """Test the error names the normalized path."""
        missing = tmp_path / "missing"

        with pytest.raises(DoesNotExistError) as exc_info:
            resolve(f"{missing}/")

        assert exc_info.value.path == str(missing)

    def test_a_file_is_no_directory(self) -> None:
        """Test classification of a resolved file."""
        file = resolve(__file__)

        assert file.is_file() is True
        assert file.is_directory() is False

    def test_a_directory_is_no_file(self, tmp_path: Path) -> None:
        """Test classification of a resolved directory."""
        directory = resolve(tmp_path)

        assert directory.is_directory() is True
        assert directory.is_file() is False

    def test_file_can_be_loaded(self, tmp_path: Path) -> None:
        """Test a resolved file loads the content on disk."""
        path = tmp_path / "file.txt"
        path.write_text("the-content", encoding="utf-8")

        assert resolve(path).load() == "the-content"  # type: ignore[union-attr]

    def test_can_access_file(self) -> None:
        """Test navigating from a resolved directory to this test module."""
        here = Path(__file__)

        file = resolve(here.parent).file(here.name)  # type: ignore[union-attr]

        assert file.as_string() == str(here)

    def test_uses_injected_filesystem(self) -> None:
        """Test resolve only consults the given backend."""
        fs = MagicMock()
        fs.is_dir.return_value = False
        fs.exists.return_value = True

        entry = resolve("/virtual/file", filesystem=fs, encoding="latin-1")

        assert isinstance(entry, ExistingFile)
        assert entry.fs is fs
        assert entry.encoding == "latin-1"
        fs.is_dir.assert_called_once_with(Path("/virtual/file"))
