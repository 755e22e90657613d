"""
Timestamp utilities for gitqs.

Maps commit timestamps to bucket keys. Git emits strict ISO-8601
timestamps (%aI / %cI) carrying the author's own UTC offset; keys are
derived from those values with fixed English tables so the result does
not depend on the process locale.
"""

from datetime import datetime
from typing import Optional

MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')
WEEKDAYS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')
HOURS = tuple(f"{hour:02d}" for hour in range(24))


def parse_timestamp(ts: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp to datetime.

    Accepts both '+00:00' offsets and a 'Z' suffix.
    Returns None if parsing fails.

    Args:
        ts: Timestamp string like "2024-01-15T10:30:00+01:00"

    Returns:
        datetime object (offset-aware when the input had an offset),
        or None if parsing failed
    """
    if not ts:
        return None

    ts = ts.strip()
    try:
        if ts.endswith('Z'):
            ts = ts[:-1] + '+00:00'

        return datetime.fromisoformat(ts)
    except (ValueError, TypeError):
        return None


def date_key(dt: datetime) -> str:
    """Calendar date as YYYY-MM-DD."""
    return dt.date().isoformat()


def month_key(dt: datetime) -> str:
    """Three-letter month abbreviation."""
    return MONTHS[dt.month - 1]


def weekday_key(dt: datetime) -> str:
    """Three-letter weekday abbreviation, Monday first."""
    return WEEKDAYS[dt.weekday()]


def hour_key(dt: datetime) -> str:
    """Zero-padded hour of day, 00-23."""
    return HOURS[dt.hour]


def start_of_local_day(now: Optional[datetime] = None) -> datetime:
    """Local wall-clock midnight of the day containing now."""
    now = now or datetime.now()
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_local_day(now: Optional[datetime] = None) -> datetime:
    """Last second of the local wall-clock day containing now."""
    now = now or datetime.now()
    return now.replace(hour=23, minute=59, second=59, microsecond=0)


def to_display(dt: Optional[datetime]) -> str:
    """Format a commit timestamp for tables, or '-' if missing."""
    if not dt:
        return "-"
    return dt.strftime('%Y-%m-%d %H:%M')
