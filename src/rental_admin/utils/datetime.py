"""
DateTime utilities for consistent timezone handling.
"""
from datetime import date, datetime, timezone, timedelta
from typing import Union


def utc_now() -> datetime:
    """
    Get the current UTC time with timezone awareness.

    Returns:
        datetime: Current UTC time with timezone info
    """
    return datetime.now(timezone.utc)


def is_expired(expiry_time: datetime, buffer_seconds: int = 0) -> bool:
    """
    Check if a datetime has expired (is in the past).

    Args:
        expiry_time: The expiry datetime to check
        buffer_seconds: Optional buffer in seconds before actual expiry

    Returns:
        bool: True if expired, False otherwise
    """
    if expiry_time.tzinfo is None:
        # Assume naive datetime is UTC
        expiry_time = expiry_time.replace(tzinfo=timezone.utc)

    if buffer_seconds > 0:
        expiry_time = expiry_time - timedelta(seconds=buffer_seconds)

    return utc_now() >= expiry_time


def parse_iso8601(value: Union[str, datetime, date]) -> datetime:
    """
    Parse an ISO 8601 date string to UTC datetime.

    Datetime and date objects are accepted as-is and normalised to UTC.
    Naive values are taken as UTC.

    Args:
        value: ISO 8601 formatted string, datetime or date

    Returns:
        datetime: UTC datetime with timezone info

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        dt = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
    else:
        raise ValueError(f"Unable to parse ISO 8601 value: {value!r}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
