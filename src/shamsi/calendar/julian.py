"""
Proleptic Gregorian <-> Julian Day Number.

The integer formulas below use floor division only, so the same expressions
run unchanged on Python ints and on int64 NumPy arrays, and the pair
round-trips exactly for every integer JDN.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from .types import GregorianDate, ensure_gregorian
from .validation import (
    as_int_array,
    check_gregorian_arrays,
    check_gregorian_date,
    check_integer,
)

IntArrayLike = Union[int, "np.ndarray"]


def _gregorian_to_jdn(y: IntArrayLike, m: IntArrayLike, d: IntArrayLike) -> IntArrayLike:
    a = (14 - m) // 12
    yy = y + 4800 - a
    mm = m + 12 * a - 3
    return (
        d + (153 * mm + 2) // 5 + 365 * yy
        + yy // 4 - yy // 100 + yy // 400 - 32045
    )


def _jdn_to_gregorian(jd: IntArrayLike) -> tuple[IntArrayLike, IntArrayLike, IntArrayLike]:
    a = jd + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


# ── scalar API ───────────────────────────────────────────────────────────

def gregorian_to_julian_day(year: int, month: int, day: int) -> int:
    check_gregorian_date(year, month, day)
    return int(_gregorian_to_jdn(int(year), int(month), int(day)))


def julian_day_to_gregorian(jd: int) -> GregorianDate:
    year, month, day = _jdn_to_gregorian(check_integer(jd, "gregorian", "julian day"))
    return GregorianDate(year, month, day)


def gregorian_date_to_julian_day(date: GregorianDate) -> int:
    date = ensure_gregorian(date)
    return gregorian_to_julian_day(date.year, date.month, date.day)


# ── array API ────────────────────────────────────────────────────────────

def gregorian_to_julian_days(
    years: IntArrayLike, months: IntArrayLike, days: IntArrayLike
) -> np.ndarray:
    y, m, d = np.broadcast_arrays(
        np.atleast_1d(as_int_array(years, "gregorian", "year")),
        np.atleast_1d(as_int_array(months, "gregorian", "month")),
        np.atleast_1d(as_int_array(days, "gregorian", "day")),
    )
    check_gregorian_arrays(y, m, d)
    return np.asarray(_gregorian_to_jdn(y, m, d), dtype=np.int64)


def julian_days_to_gregorian(jdn: IntArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    jd = np.atleast_1d(as_int_array(jdn, "gregorian", "julian day"))
    year, month, day = _jdn_to_gregorian(jd)
    return year, month, day
