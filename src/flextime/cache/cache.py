"""Local cache of time entries beyond the source's lookback limit."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Iterable, Sequence

from flextime._exceptions import InvariantError
from flextime.entries.entries import Entry, aggregate_by_date

logger = logging.getLogger(__name__)

CACHE_VERSION: int = 1

# Re-fetched on every run to pick up edits to recent entries.
FETCH_WINDOW_DAYS: int = 60

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc).isoformat()


@dataclass(frozen=True, slots=True)
class CacheRecord:
    version: int = CACHE_VERSION
    last_updated: str = _EPOCH
    entries: tuple[Entry, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "lastUpdated": self.last_updated,
            "entries": [e.to_dict() for e in self.entries],
        }

    @classmethod
    def from_dict(cls, data: Any) -> CacheRecord:
        if not isinstance(data, dict):
            raise InvariantError("Cache root must be an object.")
        if data.get("version") != CACHE_VERSION:
            raise InvariantError(f"Unsupported cache version {data.get('version')!r}.")
        raw = data.get("entries")
        if not isinstance(raw, list):
            raise InvariantError("Cache entries must be a list.")
        entries = aggregate_by_date(Entry.from_dict(e) for e in raw)
        return cls(CACHE_VERSION, str(data.get("lastUpdated", _EPOCH)), tuple(entries))


@dataclass(frozen=True, slots=True)
class FetchRange:
    start_date: date
    end_date: date
    needs_full_fetch: bool


def empty_cache() -> CacheRecord:
    return CacheRecord()


def compute_fetch_range(cache: CacheRecord, year_start: date, end_date: date) -> FetchRange:
    """
    Date window to request from the source this run.

    Empty cache: everything from `year_start` (the source caps it anyway).
    Populated cache: the trailing FETCH_WINDOW_DAYS ending at `end_date`,
    never earlier than `year_start`.
    """
    if cache.is_empty:
        return FetchRange(year_start, end_date, needs_full_fetch=True)
    start = max(end_date - timedelta(days=FETCH_WINDOW_DAYS), year_start)
    return FetchRange(start, end_date, needs_full_fetch=False)


def merge_entries(
    cached: Iterable[Entry],
    fresh: Iterable[Entry],
    fresh_window_start: date | str,
) -> list[Entry]:
    """
    Merge freshly fetched entries into the cached ones.

    Cached entries dated before `fresh_window_start` are kept as-is; from
    that date on only `fresh` counts. Same-date entries are summed. Result
    is one Entry per date, ascending.
    """
    cutoff = fresh_window_start if isinstance(fresh_window_start, str) else fresh_window_start.isoformat()
    retained = [e for e in cached if e.date < cutoff]
    return aggregate_by_date([*retained, *fresh])


def load_cache(path: str | os.PathLike[str]) -> CacheRecord:
    """
    Read the cache file.

    A missing, unreadable or unrecognised file yields an empty record; it
    never raises.
    """
    p = Path(path)
    if not p.exists():
        logger.info("No cache at %s, starting empty", p)
        return empty_cache()
    try:
        with open(p, "r", encoding="utf-8") as fh:
            data = json.load(fh)
        record = CacheRecord.from_dict(data)
    except (OSError, ValueError, KeyError, TypeError, InvariantError) as exc:
        logger.warning("Ignoring invalid cache %s (%s), starting fresh", p, exc)
        return empty_cache()
    logger.debug("Loaded %d cached entries from %s", len(record.entries), p)
    return record


def save_cache(record: CacheRecord, path: str | os.PathLike[str]) -> None:
    """Overwrite the cache file with `record` (write-then-rename)."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{p.name}.", dir=p.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(record.to_dict(), fh, indent=2)
        os.replace(tmp, p)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
    logger.debug("Saved %d entries to %s", len(record.entries), p)


def updated_record(entries: Sequence[Entry], now: datetime | None = None) -> CacheRecord:
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    return CacheRecord(CACHE_VERSION, stamp, tuple(entries))
