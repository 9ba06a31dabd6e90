"""One invocation: refresh the cache, then compute every view."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any

from flextime.cache.sync import EntrySource, SyncResult, sync_entries
from flextime.calendar.holidays import holidays_for_range
from flextime.config import FlexConfig, cache_path
from flextime.entries.entries import Entry, filter_entries
from flextime.flex.calculator import FlexResult, calculate_flex_time
from flextime.periods.weeks import WeekWindow, get_week_ranges
from flextime.report.report import dashboard_views
from flextime.trend.trend import PeriodDelta, aggregate_by_month, calculate_periods

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FlexReport:
    config: FlexConfig
    sync: SyncResult
    start_date: date
    end_date: date
    holidays: tuple[str, ...]
    entries: tuple[Entry, ...]
    summary: FlexResult
    weeks: tuple[WeekWindow, ...]
    weekly_trend: tuple[PeriodDelta, ...]
    monthly_trend: tuple[PeriodDelta, ...]

    def to_dict(self) -> dict[str, Any]:
        return dashboard_views(
            self.summary,
            self.weeks,
            self.weekly_trend,
            self.monthly_trend,
            self.entries,
            self.config.hours_per_day,
            self.config.hours_per_week,
            self.holidays,
        )


def reporting_period(today: date, include_today: bool = False) -> tuple[date, date]:
    """January 1st of `today`'s year through yesterday (or today)."""
    end = today if include_today else today - timedelta(days=1)
    return date(today.year, 1, 1), end


def run(
    config: FlexConfig,
    fetch: EntrySource,
    *,
    cache_file: str | os.PathLike[str] | None = None,
    today: date | None = None,
    include_today: bool = False,
    now: datetime | None = None,
) -> FlexReport:
    """
    Sync the entry cache through `fetch` and compute summary, weeks and trends.

    `config` must already be validated. Errors raised by `fetch` propagate
    and leave the cache untouched.
    """
    today = today or date.today()
    start, end = reporting_period(today, include_today)
    logger.info("Period %s..%s", start, end)

    sync = sync_entries(fetch, cache_file if cache_file is not None else cache_path(), start, end, now)

    holidays = holidays_for_range(start, end, config.custom_holidays)
    entries = tuple(filter_entries(sync.record.entries, start, end))
    weeks = tuple(get_week_ranges(start, end, entries))

    return FlexReport(
        config=config,
        sync=sync,
        start_date=start,
        end_date=end,
        holidays=holidays,
        entries=entries,
        summary=calculate_flex_time(start, end, entries, config.hours_per_day, holidays),
        weeks=weeks,
        weekly_trend=tuple(calculate_periods(weeks, config.hours_per_day, holidays)),
        monthly_trend=tuple(aggregate_by_month(weeks, config.hours_per_day, holidays)),
    )
