"""
Core data models for Rota.

Modified: 2026-10-18
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class Entry:
    """
    One child of the directory being browsed.

    ``size`` and ``modified`` are resolved independently: a failure to read
    one leaves only that attribute as ``None``.
    """

    name: str  # display label, lossily decoded
    path: Path
    is_dir: bool = False
    size: Optional[int] = None  # regular files only
    modified: Optional[datetime] = None

    @property
    def kind(self) -> str:
        """Human-readable entry type."""
        return "Directory" if self.is_dir else "File"

    def sort_key(self):
        """Directories first, then case-insensitive name."""
        return (not self.is_dir, self.name.lower())


@dataclass
class Snapshot:
    """
    Ordered listing of a directory captured at one point in time.

    ``error`` is set when the directory could not be opened (``entries`` is
    then empty) or when enumeration stopped part-way (``entries`` holds what
    was read before the failure).
    """

    directory: Path
    entries: List[Entry] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __len__(self) -> int:
        return len(self.entries)
