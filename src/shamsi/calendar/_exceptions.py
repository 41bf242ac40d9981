from __future__ import annotations

from typing import Optional


class CalendarError(ValueError):
    """Base exception for all calendar-related errors."""


class InvalidDate(CalendarError):
    """A (year, month, day) triple that does not name a day in its calendar."""

    def __init__(
        self,
        message: str,
        *,
        calendar: Optional[str] = None,
        year: object = None,
        month: object = None,
        day: object = None,
    ) -> None:
        super().__init__(message)
        self.calendar = calendar
        self.year = year
        self.month = month
        self.day = day


class InvalidMonth(InvalidDate):
    """Month number outside 1..12."""


class PolicyRangeExceeded(CalendarError):
    """Year outside the administrative range configured by a CalendarPolicy."""

    def __init__(self, year: int, min_year: int, max_year: int) -> None:
        super().__init__(
            f"Year {year} is outside the supported range [{min_year}, {max_year}]."
        )
        self.year = year
        self.min_year = min_year
        self.max_year = max_year
