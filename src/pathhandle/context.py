"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

The filesystem backend is typed with the ``FileSystem`` protocol, so tests
can inject doubles (for example a backend whose reads fail) without patching
module-level imports.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from pathhandle.existing import DEFAULT_ENCODING, ExistingDirectory, ExistingFile
from pathhandle.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from pathhandle.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for application dependencies.

    Attributes:
        filesystem: Backend for every real handle the CLI creates.
        encoding: Text encoding used to read and write files.
    """

    filesystem: FileSystem = field(default_factory=_default_filesystem)
    encoding: str = DEFAULT_ENCODING

    def resolve(self, path: str | os.PathLike[str]) -> ExistingFile | ExistingDirectory:
        """Resolve a path with this context's backend and encoding."""
        from pathhandle.resolve import resolve

        return resolve(path, self.filesystem, self.encoding)

    def directory(self, path: str | os.PathLike[str]) -> ExistingDirectory:
        """Wrap an existing directory with this context's backend and encoding."""
        return ExistingDirectory.from_path(path, self.filesystem, self.encoding)


def create_context(encoding: str | None = None) -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Args:
        encoding: Override the text encoding.

    Returns:
        Configured AppContext.
    """
    from pathhandle.filesystem import RealFileSystem

    return AppContext(
        filesystem=RealFileSystem(),
        encoding=encoding or DEFAULT_ENCODING,
    )
