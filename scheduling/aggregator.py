"""
Views over one account's appointments: filtering, ordering, grouping and
per-day counts for the week calendar strip.

Every function is pure and accepts ``Appointment`` models or plain mappings
with the same keys. Dates are compared as ``YYYY-MM-DD`` strings.
"""

from datetime import timedelta
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel

from utils.constants import COUNT_BADGE_LIMIT, DAYS_IN_WEEK, OTHER_DATE_BUCKET
from utils.datetime_utils import parse_iso_date


class FilterMode(str, Enum):
    """Appointment list filters."""

    ALL = "all"
    TODAY = "today"
    UPCOMING = "upcoming"
    DATE = "date"


def _get(record: Any, key: str) -> str:
    if isinstance(record, dict):
        value = record.get(key)
    else:
        value = getattr(record, key, None)
    return value or ""


def _status(record: Any) -> str:
    status = _get(record, "status")
    return status.value if isinstance(status, Enum) else status


def filter_by_mode(
    appointments: Iterable[Any],
    mode: str,
    reference_date: str,
    explicit_date: Optional[str] = None,
) -> List[Any]:
    """
    Filter appointments for the list view.

    Args:
        appointments: Appointments of one account
        mode: ``all``, ``today``, ``upcoming`` or ``date``; anything else is ``all``
        reference_date: Today's date as ``YYYY-MM-DD``
        explicit_date: Day to show in ``date`` mode

    Returns:
        Matching appointments in input order
    """
    items = list(appointments)
    mode = mode.value if isinstance(mode, FilterMode) else mode

    if mode == FilterMode.DATE.value and explicit_date:
        return [a for a in items if _get(a, "date") == explicit_date]
    if mode == FilterMode.TODAY.value:
        return [a for a in items if _get(a, "date") == reference_date]
    if mode == FilterMode.UPCOMING.value:
        return [a for a in items if _get(a, "date") >= reference_date]
    return items


def sort_chronological(appointments: Iterable[Any]) -> List[Any]:
    """Stable sort by (date, time); missing values sort first."""
    return sorted(appointments, key=lambda a: (_get(a, "date"), _get(a, "time")))


def appointments_for_day(appointments: Iterable[Any], day: str) -> List[Any]:
    """Appointments on ``day`` ordered by time (dashboard view)."""
    same_day = [a for a in appointments if _get(a, "date") == day]
    return sorted(same_day, key=lambda a: _get(a, "time"))


def counts_by_date(appointments: Iterable[Any]) -> Dict[str, int]:
    """Number of appointments per date, skipping records with no date."""
    counts: Dict[str, int] = {}
    for appointment in appointments:
        day = _get(appointment, "date")
        if not day:
            continue
        counts[day] = counts.get(day, 0) + 1
    return counts


def counts_by_status(appointments: Iterable[Any]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for appointment in appointments:
        status = _status(appointment)
        counts[status] = counts.get(status, 0) + 1
    return counts


def group_by_date(appointments: Iterable[Any]) -> List[Tuple[str, List[Any]]]:
    """
    Group appointments under their date, ascending by date.

    Records without a date are kept under the ``"other"`` key, which sorts
    after every ISO date.
    """
    groups: Dict[str, List[Any]] = {}
    for appointment in appointments:
        key = _get(appointment, "date") or OTHER_DATE_BUCKET
        groups.setdefault(key, []).append(appointment)
    return sorted(groups.items(), key=lambda item: item[0])


def week_window(center_date: str, offset_weeks: int = 0) -> List[str]:
    """
    Sunday-to-Saturday week around ``center_date`` shifted by whole weeks.

    Args:
        center_date: Any day as ``YYYY-MM-DD``
        offset_weeks: Weeks to move forward (positive) or back (negative)

    Returns:
        Seven consecutive ISO dates starting on a Sunday
    """
    shifted = parse_iso_date(center_date) + timedelta(days=offset_weeks * DAYS_IN_WEEK)
    # weekday(): Monday=0 .. Sunday=6
    days_since_sunday = (shifted.weekday() + 1) % DAYS_IN_WEEK
    start = shifted - timedelta(days=days_since_sunday)
    return [(start + timedelta(days=i)).isoformat() for i in range(DAYS_IN_WEEK)]


def format_count_badge(count: int) -> str:
    """Calendar strip badge text: empty for zero, ``9+`` for large counts."""
    if count <= 0:
        return ""
    if count > COUNT_BADGE_LIMIT:
        return f"{COUNT_BADGE_LIMIT}+"
    return str(count)


class CalendarDay(BaseModel):
    """One cell of the week calendar strip."""

    date: str
    weekday: str
    count: int
    badge: str
    is_today: bool
    is_selected: bool


def week_strip(
    appointments: Iterable[Any],
    today: str,
    offset_weeks: int = 0,
    selected_date: Optional[str] = None,
) -> List[CalendarDay]:
    """Seven calendar cells for the week ``offset_weeks`` away from ``today``."""
    counts = counts_by_date(appointments)
    selected = selected_date or today
    days = []
    for day in week_window(today, offset_weeks):
        count = counts.get(day, 0)
        days.append(
            CalendarDay(
                date=day,
                weekday=parse_iso_date(day).strftime("%a"),
                count=count,
                badge=format_count_badge(count),
                is_today=day == today,
                is_selected=day == selected,
            )
        )
    return days
