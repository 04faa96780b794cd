"""Rich output helpers for the command line."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table
from rich.tree import Tree

if TYPE_CHECKING:
    from pathhandle.protocols import Directory, Entry


def kind_of(entry: Entry) -> str:
    """Return "directory" or "file" for an entry."""
    return "directory" if entry.is_directory() else "file"


class ConsoleOutput:
    """Non-interactive output for pathhandle commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Rich console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def confirm(self, message: str, default: bool = False) -> bool:
        """Show confirmation prompt.

        Args:
            message: Confirmation message.
            default: Default response.

        Returns:
            User's response.
        """
        return Confirm.ask(message, default=default, console=self.console)

    def show_entry(self, entry: Entry) -> None:
        """Show the kind and path of a single entry."""
        self.console.print(f"[cyan]{kind_of(entry)}[/cyan] {escape(entry.as_string())}")

    def show_entries(self, entries: list[Entry], title: str) -> None:
        """Display entries table.

        Args:
            entries: Entries to list.
            title: Table title.
        """
        if not entries:
            self.console.print(f"[yellow]{escape(title)}: empty[/yellow]")
            return

        table = Table(title=escape(title))
        table.add_column("Name", style="cyan")
        table.add_column("Kind")
        table.add_column("Path")

        for entry in entries:
            path = entry.as_string()
            table.add_row(escape(os.path.basename(path) or path), kind_of(entry), escape(path))

        self.console.print(table)

    def show_tree(self, directory: Directory) -> None:
        """Display a directory as a tree, descending into every subdirectory."""
        tree = Tree(f"[bold]{escape(directory.as_string())}[/bold]")
        self._add_branch(tree, directory, set())
        self.console.print(tree)

    def _add_branch(self, tree: Tree, directory: Directory, seen: set[str]) -> None:
        seen.add(os.path.realpath(directory.as_string()))
        for entry in directory.all_files():
            name = os.path.basename(entry.as_string())
            if entry.is_directory():
                branch = tree.add(f"[blue]{escape(name)}/[/blue]")
                if os.path.realpath(entry.as_string()) not in seen:
                    self._add_branch(branch, entry, seen)  # type: ignore[arg-type]
            else:
                tree.add(escape(name))

    def show_content(self, content: str) -> None:
        """Print file content verbatim."""
        self.console.print(content, markup=False, highlight=False, end="")

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {escape(message)}")
