"""
Datetime utilities for consistent timezone handling.

Timestamps written to the tramitation log and attachments are timezone-aware
UTC ISO-8601 strings. Deadline comparisons use the local calendar date.
"""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of:
        - datetime.now() - naive, uses local timezone
        - datetime.utcnow() - naive, deprecated in Python 3.12

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def utc_now_iso() -> str:
    """Return utc_now() as an ISO-8601 string with millisecond precision."""
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def local_today() -> date:
    """Return today's date in the server's local timezone."""
    return datetime.now().date()


def parse_calendar_date(value: str | None) -> date | None:
    """
    Parse a date string as written by users or spreadsheets.

    Accepts YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY and ISO-8601 datetimes (the
    time part is discarded). Returns None for empty or unparseable input.

    Args:
        value: Raw date string

    Returns:
        The calendar date or None
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None

    parts = text.replace("/", "-").split("-")
    if len(parts) == 3 and all(p.isdigit() for p in parts):
        try:
            if len(parts[0]) == 4:
                return date(int(parts[0]), int(parts[1]), int(parts[2]))
            return date(int(parts[2]), int(parts[1]), int(parts[0]))
        except ValueError:
            return None

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None
