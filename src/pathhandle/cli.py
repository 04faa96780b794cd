"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, NoReturn

if TYPE_CHECKING:
    from pathhandle.protocols import Directory

import click
import typer
from rich.logging import RichHandler

from pathhandle import __version__
from pathhandle.console import ConsoleOutput
from pathhandle.context import AppContext, create_context
from pathhandle.exceptions import FilesystemError
from pathhandle.existing import ExistingDirectory
from pathhandle.snapshot import (
    SnapshotFormat,
    dump_snapshot,
    load_snapshot,
    restore_snapshot,
    take_snapshot,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pathhandle",
    help="Inspect and change files and directories through pathhandle handles",
    no_args_is_help=True,
)

output = ConsoleOutput()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"pathhandle v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route package logs through rich when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=output.console, rich_tracebacks=True)],
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every filesystem change")
    ] = False,
    encoding: Annotated[
        str | None,
        typer.Option(
            "--encoding",
            envvar="PATHHANDLE_ENCODING",
            help="Text encoding for reading and writing files",
        ),
    ] = None,
) -> None:
    """Inspect and change files and directories through pathhandle handles."""
    ctx.obj = create_context(encoding)
    configure_logging(verbose)


def _get_context(context: AppContext | None) -> AppContext:
    """Return the injected context, the one built by the main callback, or a default."""
    if context is not None:
        return context
    click_context = click.get_current_context(silent=True)
    if click_context is not None and isinstance(click_context.obj, AppContext):
        return click_context.obj
    return create_context()


def _fail(error: Exception) -> NoReturn:
    """Report an error and exit with status 1."""
    logger.debug("Command failed", exc_info=error)
    output.show_error(str(error))
    raise typer.Exit(1) from error


def _require_directory(ctx: AppContext, path: str) -> Directory:
    entry = ctx.resolve(path)
    if not entry.is_directory():
        output.show_error(f"\"{entry.as_string()}\" is not a directory")
        raise typer.Exit(1)
    return entry  # type: ignore[return-value]


# ============================================================================
# Inspection Commands
# ============================================================================


@app.command("info")
def info(
    path: Annotated[str, typer.Argument(help="File or directory")],
    _context=None,
) -> None:
    """Show whether a path is a file or a directory."""
    ctx = _get_context(_context)
    try:
        output.show_entry(ctx.resolve(path))
    except FilesystemError as e:
        _fail(e)


@app.command("cat")
def cat(
    path: Annotated[str, typer.Argument(help="File to print")],
    _context=None,
) -> None:
    """Print the contents of a file."""
    ctx = _get_context(_context)
    try:
        entry = ctx.resolve(path)
        if entry.is_directory():
            output.show_error(f"\"{entry.as_string()}\" is a directory")
            raise typer.Exit(1)
        output.show_content(entry.load())  # type: ignore[union-attr]
    except FilesystemError as e:
        _fail(e)


@app.command("ls")
def ls(
    path: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="List files at every depth")
    ] = False,
    _context=None,
) -> None:
    """List the entries of a directory."""
    ctx = _get_context(_context)
    try:
        directory = _require_directory(ctx, path)
        if recursive:
            entries = list(directory.all_files_recursively())
        else:
            entries = directory.all_files()
        output.show_entries(entries, title=directory.as_string())
    except FilesystemError as e:
        _fail(e)


@app.command("tree")
def tree(
    path: Annotated[str, typer.Argument(help="Directory to show")] = ".",
    _context=None,
) -> None:
    """Show a directory and everything beneath it as a tree."""
    ctx = _get_context(_context)
    try:
        output.show_tree(_require_directory(ctx, path))
    except FilesystemError as e:
        _fail(e)


# ============================================================================
# Mutation Commands
# ============================================================================


@app.command("mkdir")
def mkdir(
    parent: Annotated[str, typer.Argument(help="Existing parent directory")],
    name: Annotated[str, typer.Argument(help="Name of the new directory")],
    _context=None,
) -> None:
    """Create a subdirectory. Fails if the name is taken."""
    ctx = _get_context(_context)
    try:
        created = _require_directory(ctx, parent).create_directory(name)
        output.show_success(f"Created directory {created.as_string()}")
    except FilesystemError as e:
        _fail(e)


@app.command("write")
def write(
    parent: Annotated[str, typer.Argument(help="Existing parent directory")],
    name: Annotated[str, typer.Argument(help="Name of the new file")],
    content: Annotated[str, typer.Option("--content", "-c", help="File content")] = "",
    _context=None,
) -> None:
    """Create a file. Fails if the name is taken, never overwrites."""
    ctx = _get_context(_context)
    try:
        created = _require_directory(ctx, parent).create_file(name, content)
        output.show_success(f"Created file {created.as_string()}")
    except FilesystemError as e:
        _fail(e)


@app.command("clean")
def clean(
    path: Annotated[str, typer.Argument(help="Directory to clean")],
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive",
            "-r",
            help="Delete subdirectories too, and the directory itself",
        ),
    ] = False,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")] = False,
    _context=None,
) -> None:
    """Delete the files in a directory, or the whole tree with --recursive."""
    ctx = _get_context(_context)
    try:
        directory = _require_directory(ctx, path)
        if recursive:
            if not yes and not output.confirm(
                f"Delete {directory.as_string()} and everything beneath it?"
            ):
                output.show_warning("Cancelled")
                raise typer.Exit(1)
            directory.delete_all_files_and_directories_recursively()
            output.show_success(f"Deleted {directory.as_string()}")
        else:
            directory.delete_all_files()
            output.show_success(f"Deleted files in {directory.as_string()}")
    except FilesystemError as e:
        _fail(e)


# ============================================================================
# Snapshot Commands
# ============================================================================


@app.command("snapshot")
def snapshot(
    path: Annotated[str, typer.Argument(help="Directory to capture")],
    fmt: Annotated[
        SnapshotFormat, typer.Option("--format", "-f", help="Output format")
    ] = SnapshotFormat.JSON,
    _context=None,
) -> None:
    """Print a snapshot of a directory tree with every file's content."""
    ctx = _get_context(_context)
    try:
        text = dump_snapshot(take_snapshot(_require_directory(ctx, path)), fmt)
    except FilesystemError as e:
        _fail(e)
    output.show_content(text if text.endswith("\n") else text + "\n")


@app.command("restore")
def restore(
    snapshot_file: Annotated[str, typer.Argument(help="Snapshot file to read")],
    target: Annotated[str, typer.Argument(help="Directory to restore into, created if missing")],
    fmt: Annotated[
        SnapshotFormat | None,
        typer.Option("--format", "-f", help="Snapshot format (default: from file suffix)"),
    ] = None,
    _context=None,
) -> None:
    """Recreate a snapshot inside a directory without overwriting anything."""
    ctx = _get_context(_context)
    if fmt is None:
        suffix = Path(snapshot_file).suffix.lower()
        fmt = SnapshotFormat.YAML if suffix in (".yaml", ".yml") else SnapshotFormat.JSON
    try:
        source = ctx.resolve(snapshot_file)
        if source.is_directory():
            output.show_error(f"\"{source.as_string()}\" is a directory")
            raise typer.Exit(1)
        tree_snapshot = load_snapshot(source.load(), fmt)  # type: ignore[union-attr]
        directory = ExistingDirectory.create(target, ctx.filesystem, ctx.encoding)
        restore_snapshot(tree_snapshot, directory)
    except (FilesystemError, ValueError) as e:
        _fail(e)
    output.show_success(
        f"Restored {tree_snapshot.root.file_count()} files into {directory.as_string()}"
    )


# ============================================================================
# Interactive
# ============================================================================


@app.command("browse")
def browse(
    path: Annotated[str, typer.Argument(help="Directory to browse")] = ".",
    _context=None,
) -> None:
    """Browse a directory tree interactively."""
    from pathhandle.tui import BrowserApp

    ctx = _get_context(_context)
    try:
        directory = _require_directory(ctx, path)
    except FilesystemError as e:
        _fail(e)
    BrowserApp(directory).run()


if __name__ == "__main__":
    app()
