"""Preview pane showing the content of the highlighted file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from pathhandle.exceptions import FilesystemError

if TYPE_CHECKING:
    from pathhandle.protocols import Entry


class FilePreview(VerticalScroll):
    """Scrollable pane with the content of one file."""

    DEFAULT_CSS = """
    FilePreview {
        width: 2fr;
        border: solid $primary-background;
        padding: 0 1;
    }
    FilePreview #preview-title {
        text-style: bold;
        color: $secondary;
    }
    FilePreview #preview-body {
        color: $text;
    }
    FilePreview.error #preview-body {
        color: $error;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._text = "Select a file to preview it"

    def compose(self) -> ComposeResult:
        yield Static("", id="preview-title", markup=False)
        yield Static(self._text, id="preview-body", markup=False)

    def show_entry(self, entry: Entry) -> None:
        """Show a file's content, or a short note for directories."""
        title = self.query_one("#preview-title", Static)
        body = self.query_one("#preview-body", Static)
        title.update(entry.as_string())
        try:
            if entry.is_directory():
                text = "(directory)"
            else:
                text = entry.load()  # type: ignore[attr-defined]
        except FilesystemError as e:
            self.add_class("error")
            text = str(e)
        else:
            self.remove_class("error")
        self._text = text
        body.update(text)

    @property
    def text(self) -> str:
        """Text currently shown in the body."""
        return self._text
