from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Any, Iterable, Mapping, Sequence

import numpy as np

from flextime._exceptions import InvariantError

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR: int = 3600


@dataclass(frozen=True, slots=True)
class Entry:
    """Worked time on one local calendar day."""

    date: str               # YYYY-MM-DD, viewer's local day
    duration_seconds: int

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date, "durationSeconds": self.duration_seconds}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Entry:
        day = data["date"]
        seconds = data["durationSeconds"]
        if not isinstance(day, str):
            raise InvariantError(f"Entry date must be a string; got {day!r}.")
        try:
            date.fromisoformat(day)
        except ValueError as exc:
            raise InvariantError(f"Entry date is not YYYY-MM-DD: {day!r}.") from exc
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise InvariantError(f"durationSeconds must be an integer; got {seconds!r}.")
        if seconds < 0:
            raise InvariantError(f"durationSeconds must be >= 0; got {seconds}.")
        return cls(day, seconds)


def _durations(entries: Iterable[Entry]) -> np.ndarray:
    secs = np.fromiter((e.duration_seconds for e in entries), dtype=np.int64)
    if secs.size and (secs < 0).any():
        bad = int(secs[secs < 0][0])
        raise InvariantError(f"Negative duration reached the aggregator: {bad}s.")
    return secs


def actual_hours(entries: Iterable[Entry]) -> float:
    """Total hours worked; 0.0 for no entries."""
    return float(_durations(entries).sum()) / SECONDS_PER_HOUR


def aggregate_by_date(entries: Iterable[Entry]) -> list[Entry]:
    """Sum durations per date; one Entry per date, ascending."""
    totals: dict[str, int] = defaultdict(int)
    for e in entries:
        if e.duration_seconds < 0:
            raise InvariantError(
                f"Negative duration on {e.date}: {e.duration_seconds}s."
            )
        totals[e.date] += e.duration_seconds
    return [Entry(d, totals[d]) for d in sorted(totals)]


def hours_by_date(entries: Iterable[Entry]) -> dict[str, float]:
    """Per-day lookup of hours worked."""
    return {e.date: e.duration_seconds / SECONDS_PER_HOUR for e in aggregate_by_date(entries)}


def filter_entries(entries: Iterable[Entry], start: date, end: date) -> list[Entry]:
    """Entries dated within ``[start, end]`` inclusive."""
    lo, hi = start.isoformat(), end.isoformat()
    return [e for e in entries if lo <= e.date <= hi]


def local_day(timestamp: str, tz: tzinfo | None = None) -> str:
    """
    Calendar day of an ISO-8601 timestamp as seen in `tz`.

    `tz=None` means the system's local zone.
    """
    dt = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        raise ValueError(f"Timestamp has no UTC offset: {timestamp!r}")
    return dt.astimezone(tz).date().isoformat()


def simplify_records(records: Sequence[Mapping[str, Any]], tz: tzinfo | None = None) -> list[Entry]:
    """
    Normalise raw time-tracking records into one Entry per local day.

    Each record needs ``start`` (ISO-8601 with offset) and ``duration``
    (seconds). Running records carry a negative duration and are dropped.
    """
    kept: list[Entry] = []
    running = 0
    for rec in records:
        duration = int(rec["duration"])
        if duration < 0:
            running += 1
            continue
        kept.append(Entry(local_day(rec["start"], tz), duration))
    if running:
        logger.debug("Dropped %d running record(s)", running)
    return aggregate_by_date(kept)
