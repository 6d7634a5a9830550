"""Formatting utilities for timestamps and display"""

import re
from datetime import datetime, timezone

from ..constants import TIME_DISPLAY_FORMAT

# fromisoformat before Python 3.11 only takes 3 or 6 fractional digits
_FRACTION_RE = re.compile(r"\.(\d+)")


def format_timestamp(value: datetime) -> str:
    """Format a datetime as an RFC 3339 UTC instant

    Args:
        value: Datetime to format (naive values are taken as UTC)

    Returns:
        Timestamp string with a ``Z`` suffix

    Examples:
        >>> format_timestamp(datetime(2020, 1, 1, 4, 50, tzinfo=timezone.utc))
        '2020-01-01T04:50:00Z'
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into a UTC datetime

    Fractional seconds of any length are accepted; digits past
    microseconds are truncated.

    Args:
        value: Timestamp string, ``Z`` or numeric offset

    Returns:
        Timezone-aware UTC datetime

    Raises:
        ValueError: If the value is not a valid timestamp
    """
    if not isinstance(value, str):
        raise ValueError(f"timestamp must be a string, got {type(value).__name__}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp has no timezone: {value!r}")
    return parsed.astimezone(timezone.utc)


def format_local_time(value: datetime) -> str:
    """Format a UTC datetime in the local timezone for display"""
    return value.astimezone().strftime(TIME_DISPLAY_FORMAT)


def pluralize(count: int, noun: str) -> str:
    """Return ``"<count> <noun>"`` with an ``s`` unless count is one"""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
