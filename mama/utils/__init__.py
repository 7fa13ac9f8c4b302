"""
Utility functions for the journal.
"""
from .time_utils import (
    TIMESTAMP_FORMAT,
    now,
    format_timestamp,
    parse_timestamp,
    week_start,
    week_end,
    is_in_week,
    is_same_day,
)

__all__ = [
    'TIMESTAMP_FORMAT',
    'now',
    'format_timestamp',
    'parse_timestamp',
    'week_start',
    'week_end',
    'is_in_week',
    'is_same_day',
]
