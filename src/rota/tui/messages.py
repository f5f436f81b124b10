"""Custom Textual messages for Rota.

Modified: 2026-10-18
"""

from pathlib import Path
from typing import Optional

from textual.message import Message

from .keybindings import Action


class StateChanged(Message):
    """Posted after a browser transition; the handler re-renders the frame."""

    def __init__(self, action: Optional[Action] = None):
        super().__init__()
        self.action = action


class DirectoryLoaded(Message):
    """Posted when a directory listing has been (re)loaded."""

    def __init__(self, directory: Path, entry_count: int, error: Optional[str] = None):
        super().__init__()
        self.directory = directory
        self.entry_count = entry_count
        self.error = error
