"""
shamsi.calendar
~~~~~~~~~~~~~~~

Solar Hijri (Shamsi) and proleptic Gregorian calendar arithmetic.  Both
calendars map onto the Julian Day Number (JDN), which is the only bridge
between them.  Shamsi leap years follow the 33-year intercalation cycle
(break-points 1, 5, 9, 13, 17, 22, 26, 30); Gregorian leap years follow the
4/100/400 rule.

Basic usage::

    from shamsi.calendar import (
        ShamsiDate, add_days_to_shamsi_date, shamsi_day_of_week, shamsi_to_gregorian,
    )

    shamsi_to_gregorian(ShamsiDate(1403, 1, 1))   # → GregorianDate(2024, 3, 20)
    shamsi_day_of_week(1403, 1, 1)                # → 5 (Wednesday; 1=Saturday)
    add_days_to_shamsi_date(ShamsiDate(1403, 12, 30), 1)
                                                  # → ShamsiDate(1404, 1, 1)

NumPy arrays are accepted by the ``*_julian_days`` entry points::

    import numpy as np
    jdn = shamsi_to_julian_days(1403, np.arange(1, 13), 1)
    years, months, days = julian_days_to_gregorian(jdn)

Public API
----------
ShamsiDate, GregorianDate   Distinct date records; never interchangeable.
CalendarError               Base exception for all calendar-related errors.
InvalidDate, InvalidMonth   Raised by converters and arithmetic on bad input.
PolicyRangeExceeded         Year outside the configured CalendarPolicy range.
"""

from __future__ import annotations

from shamsi.calendar._exceptions import (
    CalendarError,
    InvalidDate,
    InvalidMonth,
    PolicyRangeExceeded,
)
from shamsi.calendar.arithmetic import (
    add_days_to_gregorian_date,
    add_days_to_shamsi_date,
    compare_shamsi_dates,
    days_between_shamsi_dates,
    first_weekday_of_month,
    gregorian_day_of_week,
    is_after,
    is_before,
    is_same_date,
    is_weekend,
    last_weekday_of_month,
    shamsi_day_of_week,
    shamsi_day_of_year,
    today_shamsi,
    weekday_of_julian_day,
)
from shamsi.calendar.converter import (
    SHAMSI_EPOCH,
    gregorian_to_shamsi,
    julian_day_to_shamsi,
    julian_days_to_shamsi,
    shamsi_date_to_julian_day,
    shamsi_to_gregorian,
    shamsi_to_julian_day,
    shamsi_to_julian_days,
)
from shamsi.calendar.julian import (
    gregorian_date_to_julian_day,
    gregorian_to_julian_day,
    gregorian_to_julian_days,
    julian_day_to_gregorian,
    julian_days_to_gregorian,
)
from shamsi.calendar.leap import (
    SHAMSI_CYCLE_DAYS,
    SHAMSI_CYCLE_YEARS,
    SHAMSI_LEAP_BREAKS,
    days_in_gregorian_month,
    days_in_shamsi_month,
    gregorian_month_length,
    gregorian_year_length,
    is_gregorian_leap_year,
    is_shamsi_leap_year,
    leap_years_in_range,
    shamsi_month_length,
    shamsi_year_length,
)
from shamsi.calendar.types import GregorianDate, ShamsiDate
from shamsi.calendar.validation import (
    check_gregorian_date,
    check_shamsi_date,
    is_valid_gregorian_date,
    is_valid_shamsi_date,
)

__all__ = [
    # types and errors
    "ShamsiDate",
    "GregorianDate",
    "CalendarError",
    "InvalidDate",
    "InvalidMonth",
    "PolicyRangeExceeded",
    # leap years and month lengths
    "SHAMSI_LEAP_BREAKS",
    "SHAMSI_CYCLE_YEARS",
    "SHAMSI_CYCLE_DAYS",
    "is_shamsi_leap_year",
    "is_gregorian_leap_year",
    "leap_years_in_range",
    "shamsi_month_length",
    "gregorian_month_length",
    "days_in_shamsi_month",
    "days_in_gregorian_month",
    "shamsi_year_length",
    "gregorian_year_length",
    # julian day conversion
    "SHAMSI_EPOCH",
    "gregorian_to_julian_day",
    "gregorian_date_to_julian_day",
    "julian_day_to_gregorian",
    "gregorian_to_julian_days",
    "julian_days_to_gregorian",
    "shamsi_to_julian_day",
    "shamsi_date_to_julian_day",
    "julian_day_to_shamsi",
    "shamsi_to_julian_days",
    "julian_days_to_shamsi",
    "shamsi_to_gregorian",
    "gregorian_to_shamsi",
    # validation
    "is_valid_shamsi_date",
    "is_valid_gregorian_date",
    "check_shamsi_date",
    "check_gregorian_date",
    # arithmetic
    "weekday_of_julian_day",
    "shamsi_day_of_week",
    "gregorian_day_of_week",
    "is_weekend",
    "first_weekday_of_month",
    "last_weekday_of_month",
    "add_days_to_shamsi_date",
    "add_days_to_gregorian_date",
    "days_between_shamsi_dates",
    "shamsi_day_of_year",
    "compare_shamsi_dates",
    "is_before",
    "is_after",
    "is_same_date",
    "today_shamsi",
]
