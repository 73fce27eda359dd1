"""
Release date helpers.

Spotify reports dates at year, month or day precision ("2024", "2024-03",
"2024-03-01"). Sorting pads them to a full ISO date; display formats them
the way the featured-release banner shows them.
"""

from datetime import date, datetime, timezone
from typing import Optional

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def normalize_release_date(release_date: str, precision: str) -> str:
    """
    Pad a release date to YYYY-MM-DD so dates of mixed precision compare
    lexicographically.

    Args:
        release_date: Date string as reported by the catalog
        precision: "day", "month" or "year"

    Returns:
        Normalized date string, or the input unchanged for unknown precisions
    """
    if precision == "day":
        return release_date
    if precision == "month":
        return f"{release_date}-01"
    if precision == "year":
        return f"{release_date}-01-01"
    return release_date


def parse_release_date(release_date: str, precision: str) -> Optional[date]:
    """Parse a catalog date into a date object, or None if it is malformed."""
    try:
        return date.fromisoformat(normalize_release_date(release_date, precision))
    except (TypeError, ValueError):
        return None


def format_release_date(release_date: str, precision: Optional[str]) -> str:
    """
    Format a release date for display.

    year  -> "2024"
    month -> "Mar 2024"
    day   -> "Mar 1, 2024"

    Unparsable dates are returned as-is.
    """
    if not release_date:
        return ""

    parsed = parse_release_date(release_date, precision or "day")
    if parsed is None:
        return release_date

    month = MONTH_ABBREVIATIONS[parsed.month - 1]
    if precision == "year":
        return str(parsed.year)
    if precision == "month":
        return f"{month} {parsed.year}"
    return f"{month} {parsed.day}, {parsed.year}"


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with milliseconds and a trailing Z."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
