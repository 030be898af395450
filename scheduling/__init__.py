"""Appointment filtering, grouping and calendar views."""

from .aggregator import (
    CalendarDay,
    FilterMode,
    appointments_for_day,
    counts_by_date,
    counts_by_status,
    filter_by_mode,
    format_count_badge,
    group_by_date,
    sort_chronological,
    week_strip,
    week_window,
)

__all__ = [
    "CalendarDay",
    "FilterMode",
    "appointments_for_day",
    "counts_by_date",
    "counts_by_status",
    "filter_by_mode",
    "format_count_badge",
    "group_by_date",
    "sort_chronological",
    "week_strip",
    "week_window",
]
