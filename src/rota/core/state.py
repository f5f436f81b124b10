"""
Browser state machine.

Holds the directory being browsed, its snapshot, the selection and the last
error. Every transition mutates the state in place and never raises;
filesystem failures are recorded in ``last_error``.

Modified: 2026-10-18
"""

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional

from .exceptions import StartupError
from .models import Entry, Snapshot
from .scanner import scan_directory
from .selection import SelectionTracker

logger = logging.getLogger(__name__)

Scanner = Callable[[Path], Snapshot]


def resolve_start_directory(path: Optional[Path] = None) -> Path:
    """
    Determine the absolute directory to start browsing in.

    Args:
        path: Optional starting path; defaults to the working directory

    Returns:
        Absolute, normalised path

    Raises:
        StartupError: If the working directory cannot be determined
    """
    try:
        cwd = os.getcwd()
    except OSError as e:
        if path is not None and os.path.isabs(os.path.expanduser(str(path))):
            return Path(os.path.normpath(os.path.expanduser(str(path))))
        raise StartupError(f"Cannot determine the working directory: {e}") from e

    if path is None:
        return Path(cwd)
    expanded = os.path.expanduser(str(path))
    return Path(os.path.normpath(os.path.join(cwd, expanded)))


class BrowserState:
    """
    Application state for one browsing session.

    Attributes:
        current_directory: Absolute path being browsed
        entries: Sorted snapshot entries, replaced wholesale on refresh
        last_error: Message from the most recent failed refresh, if any
    """

    def __init__(self, directory: Path, scanner: Scanner = scan_directory):
        self.current_directory = Path(directory)
        self.entries: List[Entry] = []
        self.last_error: Optional[str] = None
        self.selection = SelectionTracker()
        self._scanner = scanner

    @classmethod
    def open(
        cls, directory: Optional[Path] = None, scanner: Scanner = scan_directory
    ) -> "BrowserState":
        """
        Create a state for ``directory`` (or the working directory) and load it.

        Raises:
            StartupError: If no starting directory can be resolved
        """
        state = cls(resolve_start_directory(directory), scanner=scanner)
        state.refresh()
        return state

    @property
    def selected_index(self) -> int:
        return self.selection.index

    def refresh(self) -> None:
        """Re-read ``current_directory``, replacing the entries."""
        self.last_error = None

        snapshot = self._scanner(self.current_directory)
        self.entries = snapshot.entries
        if snapshot.error:
            self.last_error = snapshot.error
            logger.warning(f"Refresh of {self.current_directory} failed: {snapshot.error}")

        self.selection.clamp(len(self.entries))

    def enter_selected(self) -> None:
        """Descend into the selected entry if it is a directory."""
        entry = self.selected_entry()
        if entry is None or not entry.is_dir:
            return

        logger.debug(f"Entering {entry.path}")
        self._change_directory(entry.path)

    def go_parent(self) -> None:
        """Move up one level; no-op at the filesystem root."""
        parent = self.current_directory.parent
        if parent == self.current_directory:
            return

        logger.debug(f"Leaving {self.current_directory} for {parent}")
        self._change_directory(parent)

    def move_selection(self, delta: int) -> None:
        self.selection.move_by(delta, len(self.entries))

    def selected_entry(self) -> Optional[Entry]:
        """The highlighted entry, or None when the listing is empty."""
        if 0 <= self.selection.index < len(self.entries):
            return self.entries[self.selection.index]
        return None

    def _change_directory(self, directory: Path) -> None:
        self.current_directory = directory
        self.selection.reset()
        self.refresh()
