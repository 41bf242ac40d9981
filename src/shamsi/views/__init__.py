"""
shamsi.views
~~~~~~~~~~~~

Week, month and year views built from the calendar primitives: the seven
dates of a week, month and year statistics (weekday/weekend counts), and
padded month grids.  Views are plain numeric records; holiday and
localisation data are attached by the caller.

Basic usage::

    from shamsi.calendar import ShamsiDate
    from shamsi.views import CalendarViews

    cv = CalendarViews()                            # default CalendarPolicy
    cv.week_dates(ShamsiDate(1403, 1, 1))          # Saturday .. Friday
    cv.month_statistics(1403, 1).weekends           # → 5
    grid = cv.month_grid(1403, 1, start_of_week=3)  # Monday-first rows

A default instance is available as ``shamsi.views.default_views``.
"""

from shamsi.views.views import (
    CalendarViews,
    DayView,
    Grid,
    MonthStatistics,
    MonthSummary,
    MonthView,
    WeekView,
    YearStatistics,
    YearView,
)

default_views = CalendarViews()

__all__ = [
    "CalendarViews",
    "DayView",
    "Grid",
    "MonthStatistics",
    "MonthSummary",
    "MonthView",
    "WeekView",
    "YearStatistics",
    "YearView",
    "default_views",
]
