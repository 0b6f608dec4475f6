"""Date utilities."""
from datetime import datetime
from typing import Optional
from dateutil.parser import parse as parse_date


def to_long_date(value) -> Optional[str]:
    """
    Reformat a date (ISO string or datetime) as a long-form calendar date,
    e.g. "February 21, 2026". Returns None when the value cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = parse_date(value)
        except (ValueError, OverflowError):
            return None
    else:
        return None
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def format_compiled_date(dt: Optional[datetime] = None) -> str:
    """Weekday-qualified long date used in digest headers."""
    dt = dt or datetime.now()
    return f"{dt:%A}, {dt:%B} {dt.day}, {dt.year}"
