"""
Date and time helpers.

Timestamps are stored as naive UTC; everything shown to people goes
through format_local_datetime with the configured display time zone.
"""

from datetime import date, datetime, time
from typing import Optional, Union

import pytz
from dateutil import parser

# e.g. "01 Jan 2025, 05:30 AM"
LEAVE_DATE_FORMAT = "%d %b %Y, %I:%M %p"
NOT_AVAILABLE = "Not Available"


def utcnow() -> datetime:
    """Current time as a naive UTC datetime"""
    return datetime.now(pytz.UTC).replace(tzinfo=None)


def parse_datetime(value: Union[str, date, datetime]) -> datetime:
    """
    Parse user input into a naive UTC datetime.

    Date-only values become midnight UTC. Aware values are converted to UTC.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        if not value.strip():
            raise ValueError("Empty date string")
        try:
            parsed = parser.isoparse(value.strip())
        except (ValueError, OverflowError):
            try:
                parsed = parser.parse(value)
            except (ValueError, OverflowError) as e:
                raise ValueError(f"Unable to parse datetime string: {value}") from e
    else:
        raise ValueError(f"Unsupported date value: {value!r}")

    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(pytz.UTC).replace(tzinfo=None)
        except OverflowError as e:
            raise ValueError(f"Date out of range: {value}") from e
    return parsed


def format_local_datetime(
    value: Optional[datetime],
    tz_name: str = "Asia/Kolkata",
    fmt: str = LEAVE_DATE_FORMAT,
) -> str:
    """
    Render a stored timestamp in a local time zone.

    Naive values are treated as UTC. None renders as "Not Available".
    """
    if value is None:
        return NOT_AVAILABLE
    if value.tzinfo is None:
        value = pytz.UTC.localize(value)
    return value.astimezone(pytz.timezone(tz_name)).strftime(fmt)


def format_iso(value: Optional[datetime]) -> Optional[str]:
    """ISO-8601 rendering of a naive UTC timestamp, marked as UTC"""
    if value is None:
        return None
    if value.tzinfo is None:
        value = pytz.UTC.localize(value)
    return value.isoformat()
