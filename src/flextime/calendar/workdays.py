from datetime import date, timedelta
from typing import Iterable

import numpy as np

from flextime._exceptions import InvariantError

# Mon–Fri work, Sat/Sun off.
WEEKMASK: str = "1111100"


def workday_calendar(holidays: Iterable[str] = ()) -> np.busdaycalendar:
    """NumPy business-day calendar for a Mon–Fri week minus `holidays`."""
    hol = np.array(sorted(set(holidays)), dtype="datetime64[D]")
    return np.busdaycalendar(weekmask=WEEKMASK, holidays=hol)


def count_workdays(start: date, end: date, holidays: Iterable[str] = ()) -> int:
    """
    Number of days in ``[start, end]`` (inclusive) that are neither Saturday,
    Sunday nor in `holidays`.

    A holiday on a weekend changes nothing; the day is already excluded.
    An empty range (``end < start``) has zero workdays.
    """
    if end < start:
        return 0
    cal = workday_calendar(holidays)
    return int(np.busday_count(start, end + timedelta(days=1), busdaycal=cal))


def required_hours(
    start: date,
    end: date,
    hours_per_day: float,
    holidays: Iterable[str] = (),
) -> float:
    if hours_per_day < 0:
        raise InvariantError(f"hours_per_day must be non-negative; got {hours_per_day}.")
    return count_workdays(start, end, holidays) * hours_per_day


def week_monday(day: date) -> date:
    """Monday on or before `day`."""
    return day - timedelta(days=day.weekday())


def partial_week_required_hours(
    reference_day: date,
    hours_per_day: float,
    holidays: Iterable[str] = (),
) -> float:
    """
    Required hours from the Monday of `reference_day`'s week through
    `reference_day` inclusive, so a week in progress is pro-rated instead of
    charged in full.

    Uses the same Monday-start convention as
    :func:`flextime.periods.get_week_ranges`; the two change together.
    """
    return required_hours(week_monday(reference_day), reference_day, hours_per_day, holidays)
