from __future__ import annotations

import datetime as _dt
from typing import Iterable, Optional, Union

import numpy as np

from shamsi.config import DEFAULT_POLICY

from .converter import (
    gregorian_to_shamsi,
    julian_day_to_shamsi,
    shamsi_date_to_julian_day,
    shamsi_to_julian_day,
)
from .julian import (
    gregorian_date_to_julian_day,
    gregorian_to_julian_day,
    julian_day_to_gregorian,
)
from .leap import days_in_shamsi_month
from .types import GregorianDate, ShamsiDate, ensure_shamsi
from .validation import check_integer, check_shamsi_date

IntArrayLike = Union[int, "np.ndarray"]

# JDN 0 is a Monday; +2 lines the cycle up with 1=Saturday .. 7=Friday.
_WEEKDAY_OFFSET = 2


# ── day of week ──────────────────────────────────────────────────────────

def weekday_of_julian_day(jd: IntArrayLike) -> IntArrayLike:
    return (jd + _WEEKDAY_OFFSET) % 7 + 1


def shamsi_day_of_week(year: int, month: int, day: int) -> int:
    return weekday_of_julian_day(shamsi_to_julian_day(year, month, day))


def gregorian_day_of_week(year: int, month: int, day: int) -> int:
    return weekday_of_julian_day(gregorian_to_julian_day(year, month, day))


def is_weekend(date: ShamsiDate, weekend_days: Optional[Iterable[int]] = None) -> bool:
    date = ensure_shamsi(date)
    weekend = DEFAULT_POLICY.weekend_days if weekend_days is None else frozenset(weekend_days)
    return shamsi_day_of_week(date.year, date.month, date.day) in weekend


def first_weekday_of_month(year: int, month: int) -> int:
    return shamsi_day_of_week(year, month, 1)


def last_weekday_of_month(year: int, month: int) -> int:
    return shamsi_day_of_week(year, month, days_in_shamsi_month(year, month))


# ── add / diff ───────────────────────────────────────────────────────────

def add_days_to_shamsi_date(date: ShamsiDate, days: int) -> ShamsiDate:
    """Shift ``date`` by ``days`` (may be negative) and renormalise."""
    return julian_day_to_shamsi(
        shamsi_date_to_julian_day(date) + check_integer(days, "shamsi", "day count")
    )


def add_days_to_gregorian_date(date: GregorianDate, days: int) -> GregorianDate:
    return julian_day_to_gregorian(
        gregorian_date_to_julian_day(date) + check_integer(days, "gregorian", "day count")
    )


def days_between_shamsi_dates(a: ShamsiDate, b: ShamsiDate) -> int:
    return abs(shamsi_date_to_julian_day(b) - shamsi_date_to_julian_day(a))


def shamsi_day_of_year(date: ShamsiDate) -> int:
    date = ensure_shamsi(date)
    return shamsi_date_to_julian_day(date) - shamsi_to_julian_day(date.year, 1, 1) + 1


# ── comparison ───────────────────────────────────────────────────────────

def _checked_key(date: ShamsiDate) -> tuple[int, int, int]:
    key = ensure_shamsi(date).as_tuple()
    check_shamsi_date(*key)
    return key


def compare_shamsi_dates(a: ShamsiDate, b: ShamsiDate) -> int:
    ka = _checked_key(a)
    kb = _checked_key(b)
    return (ka > kb) - (ka < kb)


def is_before(a: ShamsiDate, b: ShamsiDate) -> bool:
    return compare_shamsi_dates(a, b) < 0


def is_after(a: ShamsiDate, b: ShamsiDate) -> bool:
    return compare_shamsi_dates(a, b) > 0


def is_same_date(a: ShamsiDate, b: ShamsiDate) -> bool:
    return compare_shamsi_dates(a, b) == 0


# ── today ────────────────────────────────────────────────────────────────

def today_shamsi(today: Optional[_dt.date] = None) -> ShamsiDate:
    today = today or _dt.date.today()
    return gregorian_to_shamsi(GregorianDate(today.year, today.month, today.day))

