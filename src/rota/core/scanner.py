"""
Directory snapshot builder.

Lists the immediate children of a directory without ever raising: failures
are reported through ``Snapshot.error`` and per-entry metadata degrades to
``None``.

Modified: 2026-10-18
"""

import logging
import os
import stat
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .models import Entry, Snapshot

logger = logging.getLogger(__name__)


def describe_os_error(exc: OSError) -> str:
    """Short message for an OSError, without the repeated filename."""
    if exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__


def display_name(raw_name: str) -> str:
    """
    Decode a filename for display.

    Bytes that are not valid UTF-8 show up as U+FFFD. Raises UnicodeError
    when the name cannot be represented at all.
    """
    return raw_name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _read_size(child: os.DirEntry) -> Optional[int]:
    try:
        info = child.stat()
    except OSError:
        return None
    if not stat.S_ISREG(info.st_mode):
        return None
    return info.st_size


def _read_modified(child: os.DirEntry) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(child.stat().st_mtime)
    except (OSError, OverflowError, ValueError):
        return None


def build_entry(child: os.DirEntry) -> Optional[Entry]:
    """Build an Entry from a scandir result, or None if its name is unreadable."""
    try:
        name = display_name(child.name)
    except UnicodeError:
        logger.debug(f"Skipping entry with unreadable name: {child.path!r}")
        return None

    try:
        is_dir = child.is_dir()
    except OSError:
        is_dir = False

    return Entry(
        name=name,
        path=Path(child.path),
        is_dir=is_dir,
        size=None if is_dir else _read_size(child),
        modified=_read_modified(child),
    )


def scan_directory(directory: Path) -> Snapshot:
    """
    Take a sorted snapshot of ``directory``.

    Args:
        directory: Directory to list (not recursed)

    Returns:
        Snapshot with directories first, then files, each group ordered by
        lowercase name. Ties keep enumeration order.
    """
    directory = Path(directory)
    entries: List[Entry] = []
    error: Optional[str] = None

    try:
        iterator = os.scandir(directory)
    except OSError as e:
        logger.warning(f"Cannot open {directory}: {e}")
        return Snapshot(
            directory=directory,
            entries=[],
            error=f"Cannot open {directory}: {describe_os_error(e)}",
        )

    with iterator:
        while True:
            try:
                child = next(iterator)
            except StopIteration:
                break
            except OSError as e:
                # The iterator cannot be resumed reliably after a read error.
                logger.warning(f"Listing of {directory} stopped early: {e}")
                error = f"Error reading {directory}: {describe_os_error(e)}"
                break

            entry = build_entry(child)
            if entry is not None:
                entries.append(entry)

    entries.sort(key=Entry.sort_key)
    logger.debug(f"Scanned {directory}: {len(entries)} entries")
    return Snapshot(directory=directory, entries=entries, error=error)
