from __future__ import annotations

from datetime import date, datetime

from ..core.constants import ISO_YEAR_PREFIX_LEN


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def is_iso_date(value: str) -> bool:
    try:
        parse_iso_date(value)
    except (TypeError, ValueError):
        return False
    return len(value) == 10


def to_display_date(full_date: str) -> str:
    """Drop the "YYYY-" prefix: "2025-05-01" -> "05-01".

    Note: the input is not validated; anything shorter than the prefix yields "".
    """
    return full_date[ISO_YEAR_PREFIX_LEN:]


def to_long_label(full_date: str) -> str:
    """Heading label for a selected day, e.g. "2025-05-01" -> "May 1".

    Falls back to the raw string when it is not an ISO date.
    """
    try:
        d = parse_iso_date(full_date)
    except (TypeError, ValueError):
        return full_date
    return f"{d.strftime('%B')} {d.day}"
