"""
tests/report/test_report.py

Covers:
  - Summary, weekly, trend and daily views
  - Two-decimal rounding at the boundary only
  - Unknown trend granularity
  - Dashboard bundle shape
"""

from datetime import date

import pytest

from flextime._exceptions import ConfigError
from flextime.entries import Entry
from flextime.flex import calculate_flex_time
from flextime.periods import get_week_ranges
from flextime.report import dashboard_data, daily_view, summary_view, trend_view, weekly_view


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def entries():
    # 1000 s = 0.2777… h; rounding per week would drift from the unrounded total
    return [Entry(f"2025-01-{d:02d}", 1000) for d in (6, 13, 20)]


@pytest.fixture
def weeks(entries):
    return get_week_ranges(date(2025, 1, 6), date(2025, 1, 26), entries)


# ── Views ─────────────────────────────────────────────────────────────────────

class TestSummaryView:

    def test_shape(self):
        r = calculate_flex_time(date(2025, 1, 6), date(2025, 1, 10), [Entry("2025-01-06", 3600)], 7)
        assert summary_view(r, 7, 35) == {
            "period": {"start": "2025-01-06", "end": "2025-01-10"},
            "workdays": 5,
            "requiredHours": 35,
            "actualHours": 1,
            "flexBalance": -34,
            "config": {"hoursPerDay": 7, "hoursPerWeek": 35},
        }


class TestWeeklyView:

    def test_rows(self, weeks):
        rows = weekly_view(weeks, 7.4)
        assert [r["weekNumber"] for r in rows] == [2, 3, 4]
        assert {r["year"] for r in rows} == {2025}
        assert rows[0]["period"] == {"start": "2025-01-06", "end": "2025-01-12"}
        assert rows[0]["requiredHours"] == 37
        assert rows[0]["actualHours"] == 0.28
        assert rows[0]["flexBalance"] == -36.72

    def test_year_start_week_reports_monday_year(self):
        (row, *_) = weekly_view(get_week_ranges(date(2025, 1, 1), date(2025, 1, 12)), 7.4)
        assert (row["weekNumber"], row["year"]) == (1, 2024)

    def test_cumulative_from_unrounded_values(self, weeks):
        rows = weekly_view(weeks, 7.4)
        # 3 × (0.27777… − 37) = −110.1666… → −110.17, not 3 × −36.72 = −110.16
        assert rows[-1]["cumulativeFlex"] == -110.17


class TestTrendView:

    def test_weekly(self, weeks):
        out = trend_view(weeks, 7.4, granularity="weekly")
        assert out["granularity"] == "weekly"
        assert [p["label"] for p in out["periods"]] == ["W02", "W03", "W04"]
        assert out["periods"][-1]["cumulative"] == -110.17

    def test_monthly(self, weeks):
        out = trend_view(weeks, 7.4, granularity="monthly")
        assert out == {
            "granularity": "monthly",
            "periods": [{"label": "Jan", "delta": -110.17, "cumulative": -110.17}],
        }

    def test_unknown_granularity(self, weeks):
        with pytest.raises(ConfigError, match="granularity"):
            trend_view(weeks, 7.4, granularity="daily")


class TestDailyView:

    def test_covers_every_day(self, entries):
        rows = daily_view(date(2025, 1, 6), date(2025, 1, 26), entries, 7.4)
        assert len(rows) == 21
        assert rows[0]["date"] == "2025-01-06"
        assert rows[0]["actualHours"] == 0.28
        assert rows[5]["isWeekend"] is True


class TestDashboardData:

    def test_bundle(self, entries):
        data = dashboard_data(date(2025, 1, 6), date(2025, 1, 26), entries, 7.4, 37, ["2025-01-07"])
        assert set(data) == {"summary", "weekly", "daily", "trend", "monthlyTrend"}
        assert data["summary"]["workdays"] == 14
        assert data["trend"]["granularity"] == "weekly"
        assert data["monthlyTrend"]["granularity"] == "monthly"
        assert data["daily"][1]["isHoliday"] is True
        assert data["weekly"][-1]["cumulativeFlex"] == data["summary"]["flexBalance"]
