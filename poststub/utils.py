"""Utility functions for poststub.

Key functions:
    today_string: Format the current date as YYYY-MM-DD.
    normalize_filename: Clean up an operator-supplied filename.
    ensure_directory: Ensure a directory exists.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path


def today_string(now: date | datetime | None = None) -> str:
    """Format a date as a four-digit year, two-digit month and two-digit day.

    The result does not depend on the host locale.

    Args:
        now: Date to format. Defaults to today's date from the host clock.

    Returns:
        Date string in YYYY-MM-DD form.

    Examples:
        >>> today_string(date(2025, 4, 20))
        '2025-04-20'
    """
    if now is None:
        now = date.today()
    return f"{now.year:04d}-{now.month:02d}-{now.day:02d}"


def normalize_filename(name: str | None) -> str:
    """Strip surrounding whitespace from an operator-supplied filename.

    Args:
        name: Raw filename as typed by the operator.

    Returns:
        Cleaned filename, possibly empty.
    """
    return (name or "").strip()


def ensure_directory(path: Path) -> bool:
    """Ensure a directory exists, creating parents as needed.

    Args:
        path: Directory to create.

    Returns:
        True if the directory had to be created, False if it already existed.
    """
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    return True
