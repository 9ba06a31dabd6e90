import logging
from datetime import date, timedelta
from typing import Iterable, Sequence

logger = logging.getLogger(__name__)

# Store Bededag was abolished by law from 2024 onwards.
GREAT_PRAYER_DAY_LAST_YEAR: int = 2023

# Offsets (days) from Easter Sunday.
_EASTER_OFFSETS: tuple[int, ...] = (
    -3,   # Maundy Thursday
    -2,   # Good Friday
    0,    # Easter Sunday
    1,    # Easter Monday
    39,   # Ascension Day
    49,   # Whit Sunday
    50,   # Whit Monday
)
_GREAT_PRAYER_DAY_OFFSET: int = 26

_FIXED: tuple[str, ...] = ("01-01", "12-25", "12-26")

WILDCARD_PREFIX = "*-"

HolidaySet = tuple[str, ...]


def easter_sunday(year: int) -> date:
    """
    Easter Sunday of `year` in the Gregorian calendar.

    Anonymous Gregorian (Meeus/Jones/Butcher) algorithm; integer arithmetic
    only, valid for every Gregorian year.
    """
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def danish_holidays(year: int) -> HolidaySet:
    """
    Danish public holidays for `year` as sorted ``YYYY-MM-DD`` strings.

    Fixed: New Year's Day, Christmas Day, Second Christmas Day.
    Moveable: Maundy Thursday, Good Friday, Easter Sunday, Easter Monday,
    Ascension Day, Whit Sunday, Whit Monday, and Great Prayer Day up to and
    including GREAT_PRAYER_DAY_LAST_YEAR.
    """
    days = {f"{year}-{md}" for md in _FIXED}

    easter = easter_sunday(year)
    offsets = list(_EASTER_OFFSETS)
    if year <= GREAT_PRAYER_DAY_LAST_YEAR:
        offsets.append(_GREAT_PRAYER_DAY_OFFSET)
    days.update((easter + timedelta(days=n)).isoformat() for n in offsets)

    return tuple(sorted(days))


def _expand_custom(year: int, specs: Iterable[str]) -> list[str]:
    prefix = f"{year}-"
    out: list[str] = []
    for spec in specs:
        if spec.startswith(WILDCARD_PREFIX):
            candidate = f"{year}-{spec[len(WILDCARD_PREFIX):]}"
            try:
                date.fromisoformat(candidate)
            except ValueError:
                # e.g. *-02-29 outside a leap year
                logger.debug("Skipping %s for %d: no such day", spec, year)
                continue
            out.append(candidate)
        elif spec.startswith(prefix):
            out.append(spec)
    return out


def all_holidays(year: int, custom_specs: Sequence[str] = ()) -> HolidaySet:
    """
    Public holidays for `year` merged with the user's custom holidays.

    `custom_specs` holds exact dates (``YYYY-MM-DD``, only used for their own
    year) and wildcards (``*-MM-DD``, used for every year). Specs are assumed
    to be validated already, see :func:`flextime.config.validate_custom_holiday`.
    """
    merged = set(danish_holidays(year))
    merged.update(_expand_custom(year, custom_specs))
    return tuple(sorted(merged))


def holidays_for_range(start: date, end: date, custom_specs: Sequence[str] = ()) -> HolidaySet:
    """All holidays for every calendar year touched by ``[start, end]``."""
    merged: set[str] = set()
    for year in range(start.year, max(start.year, end.year) + 1):
        merged.update(all_holidays(year, custom_specs))
    return tuple(sorted(merged))


def is_holiday(day: date | str, holidays: Iterable[str]) -> bool:
    key = day if isinstance(day, str) else day.isoformat()
    return key in holidays
