"""Text builders for the browser frame.

Pure functions from state to strings. Widgets display what these return and
never read the filesystem themselves.

Modified: 2026-10-18
"""

from datetime import datetime
from typing import Optional

from ..core.formatting import DEFAULT_DATE_FORMAT, format_timestamp, human_size
from ..core.models import Entry
from ..core.state import BrowserState

DIR_PREFIX = "[DIR] "
FILE_PREFIX = "      "
MISSING = "-"
NO_ENTRIES = "No entries"


def entry_label(entry: Entry) -> str:
    """List row text; directories get a visible prefix."""
    prefix = DIR_PREFIX if entry.is_dir else FILE_PREFIX
    return f"{prefix}{entry.name}"


def header_text(state: BrowserState) -> str:
    return str(state.current_directory)


def footer_text(state: BrowserState, hint_line: str) -> str:
    """Error line when the last refresh failed, key hints otherwise."""
    if state.last_error:
        return f"ERROR: {state.last_error}"
    return hint_line


def details_text(
    entry: Optional[Entry],
    date_format: str = DEFAULT_DATE_FORMAT,
    relative_time: bool = True,
    now: Optional[datetime] = None,
) -> str:
    """Details pane body for the selected entry."""
    if entry is None:
        return NO_ENTRIES

    size = human_size(entry.size) if entry.size is not None else MISSING
    if entry.modified is not None:
        modified = format_timestamp(entry.modified, date_format, relative_time, now)
    else:
        modified = MISSING

    return (
        f"Name: {entry.name}\n"
        f"Type: {entry.kind}\n"
        f"Size: {size}\n"
        f"Modified: {modified}\n"
        f"\n"
        f"Path:\n"
        f"{entry.path}"
    )
