from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Iterable, Sequence

from flextime.entries.entries import Entry, hours_by_date


@dataclass(frozen=True, slots=True)
class DayRecord:
    date: str
    day_of_week: int        # 0 = Sunday … 6 = Saturday
    actual_hours: float
    required_hours: float
    is_weekend: bool
    is_holiday: bool

    @property
    def flex_balance(self) -> float:
        return self.actual_hours - self.required_hours

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "dayOfWeek": self.day_of_week,
            "actualHours": round(self.actual_hours, 2),
            "requiredHours": round(self.required_hours, 2),
            "flexBalance": round(self.flex_balance, 2),
            "isWeekend": self.is_weekend,
            "isHoliday": self.is_holiday,
        }


def build_daily(
    start: date,
    end: date,
    entries: Sequence[Entry],
    hours_per_day: float,
    holidays: Iterable[str] = (),
) -> list[DayRecord]:
    """One record per calendar day in ``[start, end]``, with or without entries."""
    worked = hours_by_date(entries)
    hol = frozenset(holidays)
    days: list[DayRecord] = []
    current = start
    while current <= end:
        key = current.isoformat()
        weekend = current.weekday() >= 5
        holiday = key in hol
        days.append(
            DayRecord(
                date=key,
                day_of_week=(current.weekday() + 1) % 7,
                actual_hours=worked.get(key, 0.0),
                required_hours=0.0 if weekend or holiday else float(hours_per_day),
                is_weekend=weekend,
                is_holiday=holiday,
            )
        )
        current += timedelta(days=1)
    return days
