"""
tests/flex/test_daily.py

Covers:
  - One record per calendar day, with and without entries
  - Weekend / holiday flags and required hours
  - Day-of-week numbering (0 = Sunday)
  - Same-day entries summed
  - Rounded dict output
"""

from datetime import date

import pytest

from flextime.entries import Entry
from flextime.flex import build_daily


class TestBuildDaily:

    def test_every_day_present(self):
        days = build_daily(date(2025, 1, 1), date(2025, 1, 31), [], 7.4)
        assert len(days) == 31
        assert days[0].date == "2025-01-01"
        assert days[-1].date == "2025-01-31"

    def test_empty_range(self):
        assert build_daily(date(2025, 1, 2), date(2025, 1, 1), [], 7.4) == []

    def test_flags_and_requirement(self):
        # Wed 1 Jan (holiday) → Sun 5 Jan
        days = build_daily(date(2025, 1, 1), date(2025, 1, 5), [], 8, ["2025-01-01"])
        assert [d.is_holiday for d in days] == [True, False, False, False, False]
        assert [d.is_weekend for d in days] == [False, False, False, True, True]
        assert [d.required_hours for d in days] == [0, 8, 8, 0, 0]

    def test_day_of_week_sunday_zero(self):
        days = build_daily(date(2025, 1, 5), date(2025, 1, 11), [], 8)
        assert [d.day_of_week for d in days] == [0, 1, 2, 3, 4, 5, 6]

    def test_entries_mapped_and_summed(self):
        entries = [
            Entry("2025-01-06", 3600),
            Entry("2025-01-06", 1800),
            Entry("2025-01-11", 7200),
        ]
        days = {d.date: d for d in build_daily(date(2025, 1, 6), date(2025, 1, 12), entries, 8)}
        assert days["2025-01-06"].actual_hours == pytest.approx(1.5)
        assert days["2025-01-06"].flex_balance == pytest.approx(-6.5)
        assert days["2025-01-07"].actual_hours == 0
        assert days["2025-01-11"].flex_balance == pytest.approx(2.0)   # weekend work

    def test_to_dict(self):
        (day,) = build_daily(date(2025, 1, 6), date(2025, 1, 6), [Entry("2025-01-06", 1000)], 7.4)
        assert day.to_dict() == {
            "date": "2025-01-06",
            "dayOfWeek": 1,
            "actualHours": 0.28,
            "requiredHours": 7.4,
            "flexBalance": -7.12,
            "isWeekend": False,
            "isHoliday": False,
        }
