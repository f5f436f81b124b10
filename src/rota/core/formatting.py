"""
Display formatting for sizes and timestamps.

Modified: 2026-10-18
"""

from datetime import datetime
from typing import Optional

from dateutil.relativedelta import relativedelta


_SIZE_UNITS = ("KiB", "MiB", "GiB")
_AGE_FIELDS = ("years", "months", "days", "hours", "minutes", "seconds")

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def human_size(num_bytes: int) -> str:
    """
    Format a byte count using binary units.

    Raw bytes have no decimals; KiB, MiB and GiB use two. The largest unit
    that keeps the value >= 1 is chosen, GiB being the ceiling.

    Examples:
        >>> human_size(1023)
        '1023 B'
        >>> human_size(1024)
        '1.00 KiB'
    """
    if num_bytes < 1024:
        return f"{num_bytes} B"

    value = float(num_bytes)
    unit = "B"
    for unit in _SIZE_UNITS:
        value /= 1024.0
        if value < 1024.0:
            break
    return f"{value:.2f} {unit}"


def format_age(then: datetime, now: Optional[datetime] = None) -> str:
    """Describe how long ago ``then`` was, using its largest non-zero unit."""
    now = now or datetime.now()
    if then > now:
        return "in the future"

    delta = relativedelta(now, then)
    for attr in _AGE_FIELDS:
        value = getattr(delta, attr)
        if value:
            unit = attr[:-1] if value == 1 else attr
            return f"{value} {unit} ago"
    return "just now"


def format_timestamp(
    when: datetime,
    date_format: str = DEFAULT_DATE_FORMAT,
    relative: bool = True,
    now: Optional[datetime] = None,
) -> str:
    """Format a modification time, optionally followed by its age."""
    text = when.strftime(date_format)
    if relative:
        text = f"{text} ({format_age(when, now)})"
    return text
