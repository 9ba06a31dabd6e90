# src/flextime/periods/__init__.py
"""
flextime.periods
~~~~~~~~~~~~~~~~

Partitioning of a date range into ISO weeks and calendar months.

Basic usage::

    from datetime import date
    from flextime.periods import get_week_ranges, group_by_month

    weeks = get_week_ranges(date(2025, 1, 1), date(2025, 1, 31), entries)
    weeks[0].start_date    # → date(2025, 1, 1), not the preceding Monday
    months = group_by_month(weeks)
"""

from __future__ import annotations

from flextime.periods.weeks import WeekWindow, get_week_number, get_week_ranges, group_by_month

__all__ = [
    "WeekWindow",
    "get_week_number",
    "get_week_ranges",
    "group_by_month",
]
