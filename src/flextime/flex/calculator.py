from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from flextime.calendar.workdays import count_workdays, partial_week_required_hours
from flextime.entries.entries import Entry, actual_hours
from flextime._exceptions import InvariantError


@dataclass(frozen=True, slots=True)
class FlexResult:
    start_date: date
    end_date: date
    workdays: int
    required_hours: float
    actual_hours: float

    @property
    def flex_balance(self) -> float:
        """Positive = ahead of schedule, negative = behind."""
        return flex_balance(self.actual_hours, self.required_hours)


def flex_balance(actual: float, required: float) -> float:
    return actual - required


def calculate_flex_time(
    start: date,
    end: date,
    entries: Sequence[Entry],
    hours_per_day: float,
    holidays: Iterable[str] = (),
) -> FlexResult:
    """
    Flex balance over ``[start, end]``.

    `entries` must already be scoped to the range; nothing is filtered here.
    Raises InvariantError instead of returning a partial result.
    """
    if hours_per_day < 0:
        raise InvariantError(f"hours_per_day must be non-negative; got {hours_per_day}.")
    workdays = count_workdays(start, end, holidays)
    return FlexResult(
        start_date=start,
        end_date=end,
        workdays=workdays,
        required_hours=workdays * hours_per_day,
        actual_hours=actual_hours(entries),
    )
