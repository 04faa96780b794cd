"""Textual browser for directory handles."""

from pathhandle.tui.app import BrowserApp
from pathhandle.tui.preview import FilePreview

__all__ = ["BrowserApp", "FilePreview"]
