"""
Core logic for Rota.

Directory scanning, selection bookkeeping and the browser state machine.
Nothing in here knows about the terminal.

Modified: 2026-10-18
"""

from rota.core.exceptions import (
    RotaError,
    StartupError,
    ConfigurationError,
    TerminalError,
)
from rota.core.models import Entry, Snapshot
from rota.core.scanner import scan_directory
from rota.core.selection import SelectionTracker
from rota.core.state import BrowserState, resolve_start_directory

__all__ = [
    "RotaError",
    "StartupError",
    "ConfigurationError",
    "TerminalError",
    "Entry",
    "Snapshot",
    "scan_directory",
    "SelectionTracker",
    "BrowserState",
    "resolve_start_directory",
]
