# src/flextime/cache/__init__.py
"""
flextime.cache
~~~~~~~~~~~~~~

Persistent entry cache.  The time-tracking source only serves a limited
history, so entries are kept locally in a single JSON file.  Each run
re-fetches a trailing window (FETCH_WINDOW_DAYS) to pick up edits, and
entries inside that window are replaced wholesale by the fresh data.

Basic usage::

    from flextime.cache import load_cache, compute_fetch_range, merge_entries

    cache = load_cache(path)
    window = compute_fetch_range(cache, year_start, end_date)
    fresh = fetch(window.start_date, window.end_date)
    merged = merge_entries(cache.entries, fresh, window.start_date)

or all at once with :func:`sync_entries`.

Public API
----------
CacheRecord          The persisted record.
FetchRange           Window to request from the source.
compute_fetch_range  Full fetch for an empty cache, trailing window otherwise.
merge_entries        Keep old cached days, replace the fresh window.
load_cache           Read (never raises; falls back to an empty record).
save_cache           Full overwrite.
sync_entries         load → fetch → merge → save.
"""

from __future__ import annotations

from flextime.cache.cache import (
    CACHE_VERSION,
    FETCH_WINDOW_DAYS,
    CacheRecord,
    FetchRange,
    compute_fetch_range,
    empty_cache,
    load_cache,
    merge_entries,
    save_cache,
    updated_record,
)
from flextime.cache.sync import EntrySource, SyncResult, sync_entries

__all__ = [
    "CACHE_VERSION",
    "FETCH_WINDOW_DAYS",
    "CacheRecord",
    "EntrySource",
    "FetchRange",
    "SyncResult",
    "compute_fetch_range",
    "empty_cache",
    "load_cache",
    "merge_entries",
    "save_cache",
    "sync_entries",
    "updated_record",
]
