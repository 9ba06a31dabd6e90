"""JSON-ready views handed to the CLI, JSON output and browser dashboard."""

from __future__ import annotations

from datetime import date
from typing import Any, Sequence

import numpy as np

from flextime._exceptions import ConfigError
from flextime.entries.entries import Entry
from flextime.flex.calculator import FlexResult, calculate_flex_time
from flextime.flex.daily import build_daily
from flextime.periods.weeks import WeekWindow, get_week_ranges
from flextime.trend.trend import (
    MONTHLY,
    WEEKLY,
    PeriodDelta,
    aggregate_by_month,
    calculate_periods,
)

# Display precision; internal values stay unrounded.
DECIMALS: int = 2


def _r(value: float) -> float:
    return round(float(value), DECIMALS)


def _period(start: date, end: date) -> dict[str, str]:
    return {"start": start.isoformat(), "end": end.isoformat()}


def summary_view(result: FlexResult, hours_per_day: float, hours_per_week: float) -> dict[str, Any]:
    return {
        "period": _period(result.start_date, result.end_date),
        "workdays": result.workdays,
        "requiredHours": _r(result.required_hours),
        "actualHours": _r(result.actual_hours),
        "flexBalance": _r(result.flex_balance),
        "config": {"hoursPerDay": hours_per_day, "hoursPerWeek": hours_per_week},
    }


def weekly_view(
    weeks: Sequence[WeekWindow],
    hours_per_day: float,
    holidays: Sequence[str] = (),
) -> list[dict[str, Any]]:
    results = [
        calculate_flex_time(w.start_date, w.end_date, w.entries, hours_per_day, holidays)
        for w in weeks
    ]
    running = np.cumsum([r.flex_balance for r in results])
    return [
        {
            "weekNumber": w.week_number,
            "year": w.year,
            "period": _period(w.start_date, w.end_date),
            "requiredHours": _r(r.required_hours),
            "actualHours": _r(r.actual_hours),
            "flexBalance": _r(r.flex_balance),
            "cumulativeFlex": _r(c),
        }
        for w, r, c in zip(weeks, results, running)
    ]


def periods_view(granularity: str, periods: Sequence[PeriodDelta]) -> dict[str, Any]:
    return {"granularity": granularity, "periods": [p.to_dict() for p in periods]}


def trend_view(
    weeks: Sequence[WeekWindow],
    hours_per_day: float,
    holidays: Sequence[str] = (),
    granularity: str = WEEKLY,
) -> dict[str, Any]:
    if granularity == WEEKLY:
        periods = calculate_periods(weeks, hours_per_day, holidays)
    elif granularity == MONTHLY:
        periods = aggregate_by_month(weeks, hours_per_day, holidays)
    else:
        raise ConfigError("granularity", f"expected 'weekly' or 'monthly', got {granularity!r}")
    return periods_view(granularity, periods)


def daily_view(
    start: date,
    end: date,
    entries: Sequence[Entry],
    hours_per_day: float,
    holidays: Sequence[str] = (),
) -> list[dict[str, Any]]:
    return [d.to_dict() for d in build_daily(start, end, entries, hours_per_day, holidays)]


def dashboard_views(
    summary: FlexResult,
    weeks: Sequence[WeekWindow],
    weekly_trend: Sequence[PeriodDelta],
    monthly_trend: Sequence[PeriodDelta],
    entries: Sequence[Entry],
    hours_per_day: float,
    hours_per_week: float,
    holidays: Sequence[str] = (),
) -> dict[str, Any]:
    """Dashboard bundle from results that are already computed."""
    return {
        "summary": summary_view(summary, hours_per_day, hours_per_week),
        "weekly": weekly_view(weeks, hours_per_day, holidays),
        "daily": daily_view(summary.start_date, summary.end_date, entries, hours_per_day, holidays),
        "trend": periods_view(WEEKLY, weekly_trend),
        "monthlyTrend": periods_view(MONTHLY, monthly_trend),
    }


def dashboard_data(
    start: date,
    end: date,
    entries: Sequence[Entry],
    hours_per_day: float,
    hours_per_week: float,
    holidays: Sequence[str] = (),
) -> dict[str, Any]:
    """
    Everything the dashboard renders, for entries already scoped to
    ``[start, end]``.
    """
    weeks = get_week_ranges(start, end, entries)
    return dashboard_views(
        calculate_flex_time(start, end, entries, hours_per_day, holidays),
        weeks,
        calculate_periods(weeks, hours_per_day, holidays),
        aggregate_by_month(weeks, hours_per_day, holidays),
        entries,
        hours_per_day,
        hours_per_week,
        holidays,
    )
