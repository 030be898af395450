"""
Datetime utilities for consistent timezone handling.

Calendar dates travel through the system as fixed-width ``YYYY-MM-DD``
strings and times of day as ``HH:MM`` strings; these helpers convert between
those strings and ``datetime`` objects.
"""

from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo


def local_now(tz_name: Optional[str] = None) -> datetime:
    """Current time in the business timezone (``settings.timezone``)."""
    if tz_name is None:
        from config import settings

        tz_name = settings.timezone
    return datetime.now(ZoneInfo(tz_name))


def today_iso(tz_name: Optional[str] = None) -> str:
    """Today's calendar date in the business timezone as ``YYYY-MM-DD``."""
    return local_now(tz_name).date().isoformat()


def parse_iso_datetime(iso_string: str) -> datetime:
    """
    Parse ISO format datetime string to timezone-aware datetime.
    Handles both 'Z' suffix and '+00:00' timezone formats.

    Raises:
        ValueError: If datetime string cannot be parsed
    """
    normalized = iso_string.replace("Z", "+00:00")

    try:
        dt = datetime.fromisoformat(normalized)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt
    except ValueError as e:
        raise ValueError(f"Invalid datetime string: {iso_string}") from e


def parse_iso_date(date_string: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` string into a ``date``.

    Raises:
        ValueError: If the string is not a valid calendar date
    """
    try:
        return date.fromisoformat(date_string)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid date string: {date_string}") from e
