"""Error taxonomy for filesystem handles.

Every condition is its own exception class so callers can catch precisely.
All of them carry the offending path in ``.path`` and in the message.
"""

from __future__ import annotations

__all__ = [
    "DeleteError",
    "DirectoryDoesNotExistError",
    "DoesNotExistError",
    "EntryExistsError",
    "FailedToCreateDirectoryError",
    "FailedToCreateFileError",
    "FileDoesNotExistError",
    "FilesystemError",
    "LoadError",
    "StaleHandleError",
]


class FilesystemError(Exception):
    """Base class for all filesystem handle errors."""

    template = "Filesystem error at \"{path}\""

    def __init__(self, path: str) -> None:
        self.path = str(path)
        super().__init__(self.template.format(path=self.path))


class DoesNotExistError(FilesystemError):
    """Nothing exists at the path."""

    template = "File or directory \"{path}\" does not exist"


class FileDoesNotExistError(DoesNotExistError):
    """No file exists at the path."""

    template = "File \"{path}\" does not exist"


class DirectoryDoesNotExistError(DoesNotExistError):
    """No directory exists at the path."""

    template = "Directory \"{path}\" does not exist"


class EntryExistsError(FilesystemError):
    """An entry already exists where one was about to be created."""

    template = "File \"{path}\" exists"


class FailedToCreateDirectoryError(FilesystemError):
    """The OS refused to create a directory."""

    template = "Failed to create directory \"{path}\""


class FailedToCreateFileError(FilesystemError):
    """The OS refused to write a new file."""

    template = "Failed to create file \"{path}\""


class LoadError(FilesystemError):
    """Reading a file failed."""

    template = "Unable to load file \"{path}\""


class StaleHandleError(FilesystemError):
    """The entry behind a handle was removed after the handle was obtained."""

    template = "\"{path}\" does not exist any more"


class DeleteError(FilesystemError):
    """The OS refused to delete an entry."""

    template = "Failed to delete \"{path}\""
