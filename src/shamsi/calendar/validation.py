from __future__ import annotations

from numbers import Integral
from typing import Optional

import numpy as np

from shamsi.config import DEFAULT_POLICY, CalendarPolicy

from ._exceptions import InvalidDate, InvalidMonth
from .leap import (
    days_in_gregorian_month,
    days_in_shamsi_month,
    gregorian_leap_mask,
    gregorian_month_lengths,
    shamsi_leap_mask,
    shamsi_month_lengths,
)


def _is_int(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


# ── total predicates ─────────────────────────────────────────────────────

def is_valid_shamsi_date(
    year: object, month: object, day: object, policy: Optional[CalendarPolicy] = None
) -> bool:
    policy = policy or DEFAULT_POLICY
    if not (_is_int(year) and _is_int(month) and _is_int(day)):
        return False
    if not policy.contains_year(int(year)) or not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_shamsi_month(int(year), int(month))


def is_valid_gregorian_date(
    year: object, month: object, day: object, policy: Optional[CalendarPolicy] = None
) -> bool:
    policy = policy or DEFAULT_POLICY
    if not (_is_int(year) and _is_int(month) and _is_int(day)):
        return False
    if not policy.contains_year(int(year)) or not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_gregorian_month(int(year), int(month))


# ── fail-fast checks ─────────────────────────────────────────────────────
#
# Converters are proleptic in the year, so these only enforce the month and
# day bounds; the policy year range is applied by the predicates above and
# by the view layer.

def _check_scalar(calendar: str, year: object, month: object, day: object) -> None:
    if not (_is_int(year) and _is_int(month) and _is_int(day)):
        raise InvalidDate(
            f"{calendar.capitalize()} date components must be integers; "
            f"got ({year!r}, {month!r}, {day!r}).",
            calendar=calendar, year=year, month=month, day=day,
        )
    if not 1 <= month <= 12:
        raise InvalidMonth(
            f"{calendar.capitalize()} month must be between 1 and 12; got {month}.",
            calendar=calendar, year=year, month=month, day=day,
        )
    if calendar == "shamsi":
        limit = days_in_shamsi_month(int(year), int(month))
    else:
        limit = days_in_gregorian_month(int(year), int(month))
    if not 1 <= day <= limit:
        raise InvalidDate(
            f"Invalid {calendar} date {year}-{month:02d}-{day:02d}: "
            f"day must be between 1 and {limit}.",
            calendar=calendar, year=year, month=month, day=day,
        )


def check_integer(value: object, calendar: str, name: str) -> int:
    if not _is_int(value):
        raise InvalidDate(
            f"{calendar.capitalize()} {name} must be an integer; got {value!r}.",
            calendar=calendar,
        )
    return int(value)


def check_shamsi_date(year: int, month: int, day: int) -> None:
    _check_scalar("shamsi", year, month, day)


def check_gregorian_date(year: int, month: int, day: int) -> None:
    _check_scalar("gregorian", year, month, day)


def as_int_array(value: object, calendar: str, name: str) -> np.ndarray:
    arr = np.asarray(value)
    if arr.dtype.kind not in "iu":
        raise InvalidDate(
            f"{calendar.capitalize()} {name} values must be integers; got dtype {arr.dtype}.",
            calendar=calendar,
        )
    return arr.astype(np.int64, copy=False)


def _check_arrays(calendar: str, y: np.ndarray, m: np.ndarray, d: np.ndarray) -> None:
    bad_month = (m < 1) | (m > 12)
    if bad_month.any():
        i = int(np.flatnonzero(bad_month)[0])
        yi, mi, di = int(y.flat[i]), int(m.flat[i]), int(d.flat[i])
        raise InvalidMonth(
            f"{calendar.capitalize()} month must be between 1 and 12; "
            f"got {mi} at index {i}.",
            calendar=calendar, year=yi, month=mi, day=di,
        )
    if calendar == "shamsi":
        limits = shamsi_month_lengths(m, shamsi_leap_mask(y))
    else:
        limits = gregorian_month_lengths(m, gregorian_leap_mask(y))
    bad_day = (d < 1) | (d > limits)
    if bad_day.any():
        i = int(np.flatnonzero(bad_day)[0])
        yi, mi, di = int(y.flat[i]), int(m.flat[i]), int(d.flat[i])
        raise InvalidDate(
            f"Invalid {calendar} date {yi}-{mi:02d}-{di:02d} at index {i}: "
            f"day must be between 1 and {int(limits.flat[i])}.",
            calendar=calendar, year=yi, month=mi, day=di,
        )


def check_shamsi_arrays(y: np.ndarray, m: np.ndarray, d: np.ndarray) -> None:
    _check_arrays("shamsi", y, m, d)


def check_gregorian_arrays(y: np.ndarray, m: np.ndarray, d: np.ndarray) -> None:
    _check_arrays("gregorian", y, m, d)
