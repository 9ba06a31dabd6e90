from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Iterable

from flextime.cache.cache import (
    CacheRecord,
    FetchRange,
    compute_fetch_range,
    load_cache,
    merge_entries,
    save_cache,
    updated_record,
)
from flextime.entries.entries import Entry

logger = logging.getLogger(__name__)

# (start, end) inclusive → normalised entries. Errors propagate unchanged.
EntrySource = Callable[[date, date], Iterable[Entry]]


@dataclass(frozen=True, slots=True)
class SyncResult:
    record: CacheRecord
    fetch_range: FetchRange
    fetched: int


def sync_entries(
    fetch: EntrySource,
    path: str | os.PathLike[str],
    year_start: date,
    end_date: date,
    now: datetime | None = None,
) -> SyncResult:
    """
    Load the cache, fetch the required window, merge, and write it back.

    Nothing is written if `fetch` raises.
    """
    cache = load_cache(path)
    window = compute_fetch_range(cache, year_start, end_date)
    if window.needs_full_fetch:
        logger.info("Empty cache: fetching %s..%s", window.start_date, window.end_date)
    else:
        logger.info("Fetching recent entries %s..%s", window.start_date, window.end_date)

    if window.start_date > window.end_date:
        fresh: list[Entry] = []
    else:
        fresh = list(fetch(window.start_date, window.end_date))
    merged = merge_entries(cache.entries, fresh, window.start_date)
    record = updated_record(merged, now)
    save_cache(record, path)

    logger.info("Fetched %d entries, %d days in cache", len(fresh), len(merged))
    return SyncResult(record, window, len(fresh))
