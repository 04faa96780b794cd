"""Object handles for files and directories, on disk or in memory."""

__version__ = "0.1.0"

# Public API: handles, protocols, errors and the resolve entry point
from pathhandle.exceptions import (
    DeleteError,
    DirectoryDoesNotExistError,
    DoesNotExistError,
    EntryExistsError,
    FailedToCreateDirectoryError,
    FailedToCreateFileError,
    FileDoesNotExistError,
    FilesystemError,
    LoadError,
    StaleHandleError,
)
from pathhandle.existing import ExistingDirectory, ExistingFile
from pathhandle.fake import FakeDirectory, FakeFile
from pathhandle.protocols import Directory, Entry, File, FileSystem
from pathhandle.resolve import resolve

__all__ = [
    "__version__",
    "DeleteError",
    "Directory",
    "DirectoryDoesNotExistError",
    "DoesNotExistError",
    "Entry",
    "EntryExistsError",
    "ExistingDirectory",
    "ExistingFile",
    "FailedToCreateDirectoryError",
    "FailedToCreateFileError",
    "FakeDirectory",
    "FakeFile",
    "File",
    "FileDoesNotExistError",
    "FileSystem",
    "FilesystemError",
    "LoadError",
    "StaleHandleError",
    "resolve",
]
