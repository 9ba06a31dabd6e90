# src/flextime/entries/__init__.py
"""
flextime.entries
~~~~~~~~~~~~~~~~

Time entries and their aggregation.  An :class:`Entry` is the worked time
of one local calendar day; raw records from the time-tracking source are
converted once, at ingestion, by :func:`simplify_records`.

Basic usage::

    from flextime.entries import Entry, actual_hours, simplify_records

    entries = simplify_records([
        {"start": "2025-01-06T08:00:00Z", "duration": 3600},
        {"start": "2025-01-06T13:00:00Z", "duration": 1800},
    ])
    actual_hours(entries)   # → 1.5
"""

from __future__ import annotations

from flextime.entries.entries import (
    Entry,
    actual_hours,
    aggregate_by_date,
    filter_entries,
    hours_by_date,
    local_day,
    simplify_records,
)

__all__ = [
    "Entry",
    "actual_hours",
    "aggregate_by_date",
    "filter_entries",
    "hours_by_date",
    "local_day",
    "simplify_records",
]
