"""
Leap-year rules and month lengths for both calendar systems.

Shamsi leap years follow the conventional 33-year intercalation cycle: a year
is leap when ``year mod 33`` is one of the eight break-points below.  The
modulus is Python's floored ``%``, so the remainder is always in ``0..32``
and zero or negative years behave as the cycle extended backwards
(e.g. year -32 has remainder 1 and is leap; year 0 has remainder 0 and is
not).
"""

from __future__ import annotations

from typing import Final

import numpy as np

from ._exceptions import InvalidMonth

SHAMSI_LEAP_BREAKS: Final[tuple[int, ...]] = (1, 5, 9, 13, 17, 22, 26, 30)
SHAMSI_CYCLE_YEARS: Final[int] = 33
SHAMSI_CYCLE_DAYS: Final[int] = SHAMSI_CYCLE_YEARS * 365 + len(SHAMSI_LEAP_BREAKS)

_BREAK_SET: Final[frozenset[int]] = frozenset(SHAMSI_LEAP_BREAKS)
_NP_BREAKS: Final[np.ndarray] = np.array(SHAMSI_LEAP_BREAKS, dtype=np.int64)

# Index 0 unused so months index directly.
_SHAMSI_MONTH_DAYS: Final[tuple[int, ...]] = (
    0, 31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29,
)
_GREGORIAN_MONTH_DAYS: Final[tuple[int, ...]] = (
    0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
)
_NP_SHAMSI_MONTH_DAYS: Final[np.ndarray] = np.array(_SHAMSI_MONTH_DAYS, dtype=np.int64)
_NP_GREGORIAN_MONTH_DAYS: Final[np.ndarray] = np.array(_GREGORIAN_MONTH_DAYS, dtype=np.int64)


# ── leap-year oracle ─────────────────────────────────────────────────────

def is_shamsi_leap_year(year: int) -> bool:
    return year % SHAMSI_CYCLE_YEARS in _BREAK_SET


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def shamsi_leap_mask(years: np.ndarray) -> np.ndarray:
    return np.isin(np.mod(years, SHAMSI_CYCLE_YEARS), _NP_BREAKS)


def gregorian_leap_mask(years: np.ndarray) -> np.ndarray:
    return ((years % 4 == 0) & (years % 100 != 0)) | (years % 400 == 0)


def leap_breaks_through(position: int | np.ndarray) -> int | np.ndarray:
    """
    Number of break-points <= ``position`` within a 33-year cycle.

    ``position`` is compared against the break-point list itself; leap years
    are not evenly spread through the cycle.
    """
    counts = np.searchsorted(_NP_BREAKS, position, side="right")
    return int(counts) if np.ndim(counts) == 0 else counts.astype(np.int64)


def leap_years_in_range(start_year: int, end_year: int) -> list[int]:
    """Shamsi leap years in ``[start_year, end_year]``."""
    return [y for y in range(start_year, end_year + 1) if is_shamsi_leap_year(y)]


# ── month-length table ───────────────────────────────────────────────────

def _check_month(month: int, calendar: str) -> None:
    if not 1 <= month <= 12:
        raise InvalidMonth(
            f"{calendar.capitalize()} month must be between 1 and 12; got {month}.",
            calendar=calendar,
            month=month,
        )


def shamsi_month_length(month: int, is_leap: bool) -> int:
    _check_month(month, "shamsi")
    if month == 12 and is_leap:
        return 30
    return _SHAMSI_MONTH_DAYS[month]


def gregorian_month_length(month: int, is_leap: bool) -> int:
    _check_month(month, "gregorian")
    if month == 2 and is_leap:
        return 29
    return _GREGORIAN_MONTH_DAYS[month]


def days_in_shamsi_month(year: int, month: int) -> int:
    return shamsi_month_length(month, is_shamsi_leap_year(year))


def days_in_gregorian_month(year: int, month: int) -> int:
    return gregorian_month_length(month, is_gregorian_leap_year(year))


def shamsi_year_length(year: int) -> int:
    return 366 if is_shamsi_leap_year(year) else 365


def gregorian_year_length(year: int) -> int:
    return 366 if is_gregorian_leap_year(year) else 365


# ── vectorised lookups (months assumed already in 1..12) ─────────────────

def shamsi_month_lengths(months: np.ndarray, leap: np.ndarray) -> np.ndarray:
    return _NP_SHAMSI_MONTH_DAYS[months] + ((months == 12) & leap)


def gregorian_month_lengths(months: np.ndarray, leap: np.ndarray) -> np.ndarray:
    return _NP_GREGORIAN_MONTH_DAYS[months] + ((months == 2) & leap)
