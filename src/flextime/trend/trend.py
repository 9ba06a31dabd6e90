from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

import numpy as np

from flextime.flex.calculator import calculate_flex_time
from flextime.periods.weeks import WeekWindow, group_by_month

WEEKLY = "weekly"
MONTHLY = "monthly"
GRANULARITIES = (WEEKLY, MONTHLY)

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True, slots=True)
class PeriodDelta:
    label: str
    delta: float
    cumulative: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "delta": round(self.delta, 2),
            "cumulative": round(self.cumulative, 2),
        }


def week_deltas(weeks: Iterable[WeekWindow], hours_per_day: float, holidays: Sequence[str] = ()) -> np.ndarray:
    """Flex balance of each week, unrounded."""
    return np.array(
        [
            calculate_flex_time(w.start_date, w.end_date, w.entries, hours_per_day, holidays).flex_balance
            for w in weeks
        ],
        dtype=float,
    )


def _accumulate(labels: Sequence[str], deltas: np.ndarray) -> list[PeriodDelta]:
    running = np.cumsum(deltas)
    return [
        PeriodDelta(label, float(d), float(c))
        for label, d, c in zip(labels, deltas, running)
    ]


def calculate_periods(
    weeks: Sequence[WeekWindow],
    hours_per_day: float,
    holidays: Sequence[str] = (),
) -> list[PeriodDelta]:
    """Weekly trend: one ``Wnn`` period per window with a running total."""
    deltas = week_deltas(weeks, hours_per_day, holidays)
    return _accumulate([w.label for w in weeks], deltas)


def aggregate_by_month(
    weeks: Sequence[WeekWindow],
    hours_per_day: float,
    holidays: Sequence[str] = (),
) -> list[PeriodDelta]:
    """Monthly trend: week deltas summed by the month each week starts in."""
    groups = group_by_month(weeks)
    labels = [_MONTH_ABBR[month - 1] for _, month in groups]
    deltas = np.array(
        [week_deltas(ws, hours_per_day, holidays).sum() for ws in groups.values()],
        dtype=float,
    )
    return _accumulate(labels, deltas)
