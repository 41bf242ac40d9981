"""
shamsi
~~~~~~

Solar Hijri (Shamsi) <-> Gregorian conversion, leap-year rules, date
arithmetic and calendar views.

Sub-packages
------------
shamsi.calendar   Leap years, month lengths, JDN converters, validation,
                  day-of-week and date arithmetic.
shamsi.views      Week/month/year views, statistics and month grids.
shamsi.config     CalendarPolicy (supported years, weekend, start of week).
"""

import logging

from shamsi.calendar import (
    CalendarError,
    GregorianDate,
    InvalidDate,
    InvalidMonth,
    PolicyRangeExceeded,
    ShamsiDate,
    gregorian_to_shamsi,
    shamsi_to_gregorian,
)
from shamsi.config import DEFAULT_POLICY, CalendarPolicy
from shamsi.views import CalendarViews

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalendarError",
    "CalendarPolicy",
    "CalendarViews",
    "DEFAULT_POLICY",
    "GregorianDate",
    "InvalidDate",
    "InvalidMonth",
    "PolicyRangeExceeded",
    "ShamsiDate",
    "gregorian_to_shamsi",
    "shamsi_to_gregorian",
]
