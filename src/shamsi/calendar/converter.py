"""
Shamsi <-> Julian Day Number, and Shamsi <-> Gregorian through the JDN.

Forward: ``epoch + year offset + month offset + (day - 1)`` where the year
offset counts 365 days per elapsed year plus the leap days of the 33-year
cycle.  Inverse: estimate the cycle from the day count, then walk forward a
year at a time until the remainder fits inside the current year.  The walk
uses the same leap rule as the forward direction, so the two agree at every
cycle edge.
"""

from __future__ import annotations

from typing import Final, Union

import numpy as np

from ._exceptions import CalendarError
from .julian import _gregorian_to_jdn, _jdn_to_gregorian
from .leap import (
    SHAMSI_CYCLE_DAYS,
    SHAMSI_CYCLE_YEARS,
    SHAMSI_LEAP_BREAKS,
    leap_breaks_through,
    shamsi_leap_mask,
    shamsi_year_length,
)
from .types import GregorianDate, ShamsiDate, ensure_gregorian, ensure_shamsi
from .validation import (
    as_int_array,
    check_gregorian_date,
    check_integer,
    check_shamsi_arrays,
    check_shamsi_date,
)

IntArrayLike = Union[int, "np.ndarray"]

# JDN of 1/1/1 (Gregorian 622-03-21).
SHAMSI_EPOCH: Final[int] = 1948320

_FIRST_HALF_DAYS: Final[int] = 6 * 31
# One full cycle plus the off-by-one slack of the cycle estimate.
_MAX_WALK: Final[int] = SHAMSI_CYCLE_YEARS + 1


# ── offsets ──────────────────────────────────────────────────────────────

def _year_offset(y: IntArrayLike) -> IntArrayLike:
    elapsed = y - 1
    cycles = elapsed // SHAMSI_CYCLE_YEARS
    position = elapsed - cycles * SHAMSI_CYCLE_YEARS
    return 365 * elapsed + cycles * len(SHAMSI_LEAP_BREAKS) + leap_breaks_through(position)


def _month_offset(month: int) -> int:
    if month <= 7:
        return (month - 1) * 31
    return _FIRST_HALF_DAYS + (month - 7) * 30


def _split_day_of_year(remaining: int) -> tuple[int, int]:
    day_of_year = remaining + 1
    if day_of_year <= _FIRST_HALF_DAYS:
        return (day_of_year - 1) // 31 + 1, (day_of_year - 1) % 31 + 1
    after = day_of_year - _FIRST_HALF_DAYS
    return (after - 1) // 30 + 7, (after - 1) % 30 + 1


def _cycle_estimate(jd: IntArrayLike) -> tuple[IntArrayLike, IntArrayLike]:
    days = jd - SHAMSI_EPOCH
    cycles = days // SHAMSI_CYCLE_DAYS
    return cycles * SHAMSI_CYCLE_YEARS + 1, days - cycles * SHAMSI_CYCLE_DAYS


# ── scalar API ───────────────────────────────────────────────────────────

def shamsi_to_julian_day(year: int, month: int, day: int) -> int:
    check_shamsi_date(year, month, day)
    year, month, day = int(year), int(month), int(day)
    return SHAMSI_EPOCH + _year_offset(year) + _month_offset(month) + day - 1


def julian_day_to_shamsi(jd: int) -> ShamsiDate:
    year, remaining = _cycle_estimate(check_integer(jd, "shamsi", "julian day"))
    for _ in range(_MAX_WALK):
        length = shamsi_year_length(year)
        if remaining < length:
            break
        remaining -= length
        year += 1
    else:
        raise CalendarError(f"Shamsi year search did not converge for JDN {jd}.")
    month, day = _split_day_of_year(remaining)
    return ShamsiDate(year, month, day)


def shamsi_date_to_julian_day(date: ShamsiDate) -> int:
    date = ensure_shamsi(date)
    return shamsi_to_julian_day(date.year, date.month, date.day)


def shamsi_to_gregorian(date: ShamsiDate) -> GregorianDate:
    year, month, day = _jdn_to_gregorian(shamsi_date_to_julian_day(date))
    return GregorianDate(year, month, day)


def gregorian_to_shamsi(date: GregorianDate) -> ShamsiDate:
    date = ensure_gregorian(date)
    check_gregorian_date(date.year, date.month, date.day)
    return julian_day_to_shamsi(_gregorian_to_jdn(date.year, date.month, date.day))


# ── array API ────────────────────────────────────────────────────────────

def shamsi_to_julian_days(
    years: IntArrayLike, months: IntArrayLike, days: IntArrayLike
) -> np.ndarray:
    y, m, d = np.broadcast_arrays(
        np.atleast_1d(as_int_array(years, "shamsi", "year")),
        np.atleast_1d(as_int_array(months, "shamsi", "month")),
        np.atleast_1d(as_int_array(days, "shamsi", "day")),
    )
    check_shamsi_arrays(y, m, d)
    month_days = np.where(m <= 7, (m - 1) * 31, _FIRST_HALF_DAYS + (m - 7) * 30)
    return (SHAMSI_EPOCH + _year_offset(y) + month_days + d - 1).astype(np.int64)


def julian_days_to_shamsi(jdn: IntArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    jd = np.atleast_1d(as_int_array(jdn, "shamsi", "julian day"))
    year, remaining = _cycle_estimate(jd)
    for _ in range(_MAX_WALK):
        length = 365 + shamsi_leap_mask(year)
        step = remaining >= length
        if not step.any():
            break
        remaining = np.where(step, remaining - length, remaining)
        year = year + step
    else:
        raise CalendarError("Shamsi year search did not converge.")

    day_of_year = remaining + 1
    first_half = day_of_year <= _FIRST_HALF_DAYS
    after = day_of_year - _FIRST_HALF_DAYS
    month = np.where(first_half, (day_of_year - 1) // 31 + 1, (after - 1) // 30 + 7)
    day = np.where(first_half, (day_of_year - 1) % 31 + 1, (after - 1) % 30 + 1)
    return year.astype(np.int64), month.astype(np.int64), day.astype(np.int64)
