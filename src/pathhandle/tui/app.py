"""Directory browser application."""

from __future__ import annotations

import os
from typing import Any

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Static, Tree
from textual.widgets.tree import TreeNode

from pathhandle.exceptions import FilesystemError
from pathhandle.protocols import Directory, Entry
from pathhandle.tui.preview import FilePreview


def _label(entry: Entry) -> str:
    path = entry.as_string()
    return os.path.basename(path) or path


class BrowserApp(App):
    """Browse a directory handle: lazily expanded tree plus a file preview."""

    TITLE = "pathhandle"

    CSS = """
    Screen {
        background: $surface;
    }

    #app-title {
        dock: top;
        height: 3;
        padding: 1 2;
        background: $primary-background;
        text-style: bold;
        color: $text;
    }

    #entries {
        width: 1fr;
        border: solid $primary-background;
    }

    #entries:focus {
        border: solid $accent;
    }

    #status-bar {
        dock: bottom;
        height: 1;
        padding: 0 2;
        background: $primary-background;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "refresh", "Refresh"),
    ]

    def __init__(self, directory: Directory, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.directory = directory

    def compose(self) -> ComposeResult:
        yield Static(self.directory.as_string(), id="app-title")
        with Horizontal():
            yield Tree(_label(self.directory), data=self.directory, id="entries")
            yield FilePreview(id="preview")
        yield Static("", id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Load the top level when the app mounts."""
        tree = self.query_one("#entries", Tree)
        self._populate(tree.root)
        tree.root.expand()
        tree.focus()

    def _set_status(self, message: str) -> None:
        self.query_one("#status-bar", Static).update(message)

    def _populate(self, node: TreeNode[Entry]) -> None:
        """Add the children of a directory node."""
        directory: Directory = node.data  # type: ignore[assignment]
        node.remove_children()
        try:
            entries = directory.all_files()
            for entry in entries:
                if entry.is_directory():
                    node.add(_label(entry) + "/", data=entry, allow_expand=True)
                else:
                    node.add_leaf(_label(entry), data=entry)
        except FilesystemError as e:
            self._set_status(str(e))
            return
        self._set_status(f"{directory.as_string()}: {len(entries)} entries")

    @on(Tree.NodeExpanded)
    def on_node_expanded(self, event: Tree.NodeExpanded[Entry]) -> None:
        if event.node is not event.node.tree.root and not event.node.children:
            self._populate(event.node)

    @on(Tree.NodeHighlighted)
    def on_node_highlighted(self, event: Tree.NodeHighlighted[Entry]) -> None:
        if event.node.data is not None:
            self.query_one("#preview", FilePreview).show_entry(event.node.data)

    def action_refresh(self) -> None:
        """Reload the tree from the directory handle."""
        tree = self.query_one("#entries", Tree)
        self._populate(tree.root)
        tree.root.expand()
