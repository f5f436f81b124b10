"""Test helpers for Rota tests.

Created: 2026-10-18
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rota.core.models import Entry, Snapshot


def make_entry(name: str, is_dir: bool = False, size: Optional[int] = None,
               modified: Optional[datetime] = None, parent: Path = Path("/data")) -> Entry:
    """Build an Entry without touching the filesystem."""
    return Entry(name=name, path=parent / name, is_dir=is_dir, size=size, modified=modified)


class FakeScanner:
    """Scanner returning queued snapshots, recording each directory asked for."""

    def __init__(self, *snapshots: Snapshot):
        self.snapshots: List[Snapshot] = list(snapshots)
        self.calls: List[Path] = []

    def __call__(self, directory: Path) -> Snapshot:
        self.calls.append(directory)
        if self.snapshots:
            snapshot = self.snapshots.pop(0)
            return Snapshot(directory=directory, entries=list(snapshot.entries),
                            error=snapshot.error)
        return Snapshot(directory=directory)


def names(entries) -> List[str]:
    """Entry names in order."""
    return [e.name for e in entries]
