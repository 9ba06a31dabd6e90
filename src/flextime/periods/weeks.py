from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Sequence

from flextime.calendar.workdays import week_monday
from flextime.entries.entries import Entry, filter_entries


@dataclass(frozen=True, slots=True)
class WeekWindow:
    """
    One Monday-anchored week, clipped to the partitioned range.

    `week_number` is the ISO-8601 week; `year` is the calendar year of the
    window's Monday, so the window starting Mon 30 Dec 2024 is W01 of 2024.
    `start_date`/`end_date` are the clipped bounds.
    """

    week_number: int
    year: int
    start_date: date
    end_date: date
    entries: tuple[Entry, ...]

    @property
    def label(self) -> str:
        return f"W{self.week_number:02d}"


def get_week_number(day: date) -> int:
    return day.isocalendar()[1]


def get_week_ranges(start: date, end: date, entries: Sequence[Entry] = ()) -> list[WeekWindow]:
    """
    Split ``[start, end]`` into Monday–Sunday windows.

    The first and last windows are clipped to the range, so a mid-week start
    gives a short first window beginning at `start`. Each window holds the
    entries dated within its clipped bounds.
    """
    weeks: list[WeekWindow] = []
    if end < start:
        return weeks
    monday = week_monday(start)
    while monday <= end:
        sunday = monday + timedelta(days=6)
        lo = max(monday, start)
        hi = min(sunday, end)
        weeks.append(
            WeekWindow(
                week_number=get_week_number(monday),
                year=monday.year,
                start_date=lo,
                end_date=hi,
                entries=tuple(filter_entries(entries, lo, hi)),
            )
        )
        monday += timedelta(days=7)
    return weeks


def group_by_month(weeks: Iterable[WeekWindow]) -> dict[tuple[int, int], list[WeekWindow]]:
    """
    Group windows by (year, month) of their clipped start date.

    A week straddling a month boundary belongs wholly to its start month.
    Keys are in chronological order.
    """
    groups: dict[tuple[int, int], list[WeekWindow]] = {}
    for week in weeks:
        key = (week.start_date.year, week.start_date.month)
        groups.setdefault(key, []).append(week)
    return dict(sorted(groups.items()))
