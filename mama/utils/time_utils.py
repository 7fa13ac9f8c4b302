"""
Time-related utility functions.

Timestamps are stored and shown as dd/MM/yy HH:mm. Weeks run from
Monday 00:00 (inclusive) to the following Monday 00:00 (exclusive).
"""
from datetime import datetime, timedelta

TIMESTAMP_FORMAT = "%d/%m/%y %H:%M"


def now() -> datetime:
    """Current local time, truncated to whole seconds."""
    return datetime.now().replace(microsecond=0)


def format_timestamp(dt: datetime) -> str:
    """
    Format a timestamp for storage and display.

    Example:
        >>> format_timestamp(datetime(2025, 10, 28, 1, 14))
        '28/10/25 01:14'
    """
    return dt.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: str) -> datetime:
    """
    Parse a dd/MM/yy HH:mm timestamp.

    Raises:
        ValueError: If the text does not match the format
    """
    return datetime.strptime(text.strip(), TIMESTAMP_FORMAT)


def week_start(ref: datetime) -> datetime:
    """Monday 00:00 of the week containing ref."""
    midnight = ref.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=midnight.weekday())


def week_end(ref: datetime) -> datetime:
    """The Monday 00:00 after ref's week (exclusive bound)."""
    return week_start(ref) + timedelta(days=7)


def is_in_week(ts: datetime, ref: datetime) -> bool:
    """True if ts falls in the Monday-aligned week containing ref."""
    return week_start(ref) <= ts < week_end(ref)


def is_same_day(ts: datetime, ref: datetime) -> bool:
    """True if ts and ref fall on the same calendar day."""
    return ts.date() == ref.date()
