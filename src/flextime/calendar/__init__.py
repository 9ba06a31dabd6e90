# src/flextime/calendar/__init__.py
"""
flextime.calendar
~~~~~~~~~~~~~~~~~

Danish public holidays, user-defined custom holidays and workday counting.

Holidays are plain ``YYYY-MM-DD`` strings so they can be stored in config
files, compared directly with entry dates and handed to NumPy's business-day
routines without conversion.

Basic usage::

    from datetime import date
    from flextime.calendar import all_holidays, count_workdays

    hol = all_holidays(2025, ["*-12-24", "2025-06-05"])
    count_workdays(date(2025, 4, 14), date(2025, 4, 20), hol)   # → 3

Public API
----------
danish_holidays              Fixed + Easter-based public holidays for a year.
all_holidays                 Public holidays merged with custom specs.
holidays_for_range           Union of all_holidays over the years of a range.
is_holiday                   Membership test.
easter_sunday                Gregorian Easter Sunday.
count_workdays               Weekdays in a range that are not holidays.
required_hours               count_workdays × hours per day.
partial_week_required_hours  Required hours Monday → reference day.
"""

from __future__ import annotations

from flextime.calendar.holidays import (
    GREAT_PRAYER_DAY_LAST_YEAR,
    all_holidays,
    danish_holidays,
    easter_sunday,
    holidays_for_range,
    is_holiday,
)
from flextime.calendar.workdays import (
    count_workdays,
    partial_week_required_hours,
    required_hours,
    week_monday,
    workday_calendar,
)

__all__ = [
    "GREAT_PRAYER_DAY_LAST_YEAR",
    "all_holidays",
    "count_workdays",
    "danish_holidays",
    "easter_sunday",
    "holidays_for_range",
    "is_holiday",
    "partial_week_required_hours",
    "required_hours",
    "week_monday",
    "workday_calendar",
]
