# src/flextime/trend/__init__.py
"""
flextime.trend
~~~~~~~~~~~~~~

Cumulative flex series per week or per month.

Basic usage::

    from flextime.periods import get_week_ranges
    from flextime.trend import aggregate_by_month, calculate_periods

    weeks = get_week_ranges(start, end, entries)
    weekly = calculate_periods(weeks, 7.4, holidays)      # W01, W02, …
    monthly = aggregate_by_month(weeks, 7.4, holidays)    # Jan, Feb, …
    weekly[-1].cumulative == monthly[-1].cumulative       # same total
"""

from __future__ import annotations

from flextime.trend.trend import (
    GRANULARITIES,
    MONTHLY,
    WEEKLY,
    PeriodDelta,
    aggregate_by_month,
    calculate_periods,
    week_deltas,
)

__all__ = [
    "GRANULARITIES",
    "MONTHLY",
    "WEEKLY",
    "PeriodDelta",
    "aggregate_by_month",
    "calculate_periods",
    "week_deltas",
]
