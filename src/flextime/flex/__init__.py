# src/flextime/flex/__init__.py
"""
flextime.flex
~~~~~~~~~~~~~

Flex balance = hours worked − hours required.

Basic usage::

    from datetime import date
    from flextime.entries import Entry
    from flextime.flex import calculate_flex_time

    r = calculate_flex_time(
        date(2025, 1, 6), date(2025, 1, 10),
        [Entry("2025-01-06", 3600)], hours_per_day=7,
    )
    r.workdays, r.required_hours, r.flex_balance   # → 5, 35, -34.0

Public API
----------
FlexResult                   Result of a range calculation.
calculate_flex_time          Workdays, required, actual and balance for a range.
partial_week_required_hours  Pro-rated requirement for a week in progress.
build_daily                  Day-by-day series for calendar/heatmap views.
"""

from __future__ import annotations

from flextime.flex.calculator import (
    FlexResult,
    calculate_flex_time,
    flex_balance,
    partial_week_required_hours,
)
from flextime.flex.daily import DayRecord, build_daily

__all__ = [
    "DayRecord",
    "FlexResult",
    "build_daily",
    "calculate_flex_time",
    "flex_balance",
    "partial_week_required_hours",
]
