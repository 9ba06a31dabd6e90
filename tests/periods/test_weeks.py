"""
tests/periods/test_weeks.py

Covers:
  - ISO week numbers, including year boundaries
  - Monday-anchored windows clipped to the range
  - Entry assignment to windows
  - Windows cover the range exactly once
  - Month grouping by window start date
"""

from datetime import date, timedelta

import pytest

from flextime.entries import Entry
from flextime.periods import get_week_number, get_week_ranges, group_by_month


# ── ISO week numbers ──────────────────────────────────────────────────────────

class TestWeekNumber:

    @pytest.mark.parametrize(
        "day, expected",
        [
            (date(2025, 1, 1), 1),
            (date(2025, 1, 6), 2),
            (date(2024, 12, 30), 1),   # belongs to 2025-W01
            (date(2021, 1, 3), 53),    # belongs to 2020-W53
            (date(2026, 12, 31), 53),
            (date(2025, 12, 28), 52),
        ],
    )
    def test_iso(self, day, expected):
        assert get_week_number(day) == expected


# ── get_week_ranges ───────────────────────────────────────────────────────────

class TestWeekRanges:

    def test_mid_week_start_is_clipped(self):
        entries = [Entry("2025-01-06", 60), Entry("2025-01-08", 120), Entry("2025-01-10", 180)]
        weeks = get_week_ranges(date(2025, 1, 8), date(2025, 1, 19), entries)
        first = weeks[0]
        assert first.start_date == date(2025, 1, 8)
        assert first.end_date == date(2025, 1, 12)
        assert [e.date for e in first.entries] == ["2025-01-08", "2025-01-10"]

    def test_last_window_clipped_to_end(self):
        weeks = get_week_ranges(date(2025, 1, 6), date(2025, 1, 15))
        assert [(w.start_date, w.end_date) for w in weeks] == [
            (date(2025, 1, 6), date(2025, 1, 12)),
            (date(2025, 1, 13), date(2025, 1, 15)),
        ]

    def test_single_day(self):
        (w,) = get_week_ranges(date(2025, 1, 8), date(2025, 1, 8))
        assert w.start_date == w.end_date == date(2025, 1, 8)

    def test_empty_range(self):
        assert get_week_ranges(date(2025, 1, 8), date(2025, 1, 7)) == []

    def test_range_ending_on_sunday(self):
        weeks = get_week_ranges(date(2025, 1, 6), date(2025, 1, 19))
        assert len(weeks) == 2
        assert weeks[-1].end_date == date(2025, 1, 19)

    def test_year_start_week_is_iso_week_one(self):
        # Anchored on Mon 30 Dec 2024: ISO 2025-W01, calendar year 2024
        w = get_week_ranges(date(2025, 1, 1), date(2025, 1, 31))[0]
        assert (w.week_number, w.year, w.label) == (1, 2024, "W01")
        assert w.start_date == date(2025, 1, 1)

    def test_week_53(self):
        # Anchored on Mon 28 Dec 2020
        w = get_week_ranges(date(2021, 1, 1), date(2021, 1, 10))[0]
        assert (w.week_number, w.year) == (53, 2020)

    def test_year_is_calendar_year_of_monday(self):
        # Mon 29 Dec 2025 is ISO 2026-W01
        weeks = get_week_ranges(date(2025, 12, 22), date(2026, 1, 11))
        assert [(w.week_number, w.year) for w in weeks] == [(52, 2025), (1, 2025), (2, 2026)]

    def test_windows_tile_the_range(self):
        start, end = date(2025, 1, 1), date(2025, 12, 31)
        weeks = get_week_ranges(start, end)
        assert weeks[0].start_date == start
        assert weeks[-1].end_date == end
        for a, b in zip(weeks, weeks[1:]):
            assert b.start_date == a.end_date + timedelta(days=1)
            assert b.start_date.weekday() == 0
        assert sum((w.end_date - w.start_date).days + 1 for w in weeks) == 365

    def test_every_entry_in_exactly_one_window(self):
        entries = [Entry((date(2025, 1, 1) + timedelta(days=n)).isoformat(), 60) for n in range(90)]
        weeks = get_week_ranges(date(2025, 1, 1), date(2025, 3, 31), entries)
        assert sum(len(w.entries) for w in weeks) == 90

    def test_entries_outside_range_dropped(self):
        entries = [Entry("2024-12-30", 60), Entry("2025-01-02", 60), Entry("2025-01-20", 60)]
        weeks = get_week_ranges(date(2025, 1, 1), date(2025, 1, 12), entries)
        assert [e.date for w in weeks for e in w.entries] == ["2025-01-02"]


# ── Month grouping ────────────────────────────────────────────────────────────

class TestGroupByMonth:

    def test_straddling_week_goes_to_start_month(self):
        # Mon 27 Jan → Sun 2 Feb 2025 belongs to January
        weeks = get_week_ranges(date(2025, 1, 1), date(2025, 2, 28))
        groups = group_by_month(weeks)
        jan = groups[(2025, 1)]
        assert jan[-1].start_date == date(2025, 1, 27)
        assert jan[-1].end_date == date(2025, 2, 2)
        assert groups[(2025, 2)][0].start_date == date(2025, 2, 3)

    def test_chronological_keys(self):
        weeks = get_week_ranges(date(2024, 11, 1), date(2025, 2, 10))
        assert list(group_by_month(weeks)) == [(2024, 11), (2024, 12), (2025, 1), (2025, 2)]

    def test_all_weeks_grouped(self):
        weeks = get_week_ranges(date(2025, 1, 1), date(2025, 6, 30))
        assert sum(len(ws) for ws in group_by_month(weeks).values()) == len(weeks)
