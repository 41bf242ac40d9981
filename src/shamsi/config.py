"""
Library-wide policy knobs.

The calendar formulas themselves are total over the integers; a
CalendarPolicy only decides which years the library agrees to serve, which
weekday numbers count as the weekend, and where a week starts by default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from shamsi.calendar._exceptions import PolicyRangeExceeded

SATURDAY: Final[int] = 1
SUNDAY: Final[int] = 2
MONDAY: Final[int] = 3
FRIDAY: Final[int] = 7

START_OF_WEEK_CHOICES: Final[tuple[int, ...]] = (SATURDAY, SUNDAY, MONDAY)


@dataclass(frozen=True, slots=True)
class CalendarPolicy:
    min_year: int = 1
    max_year: int = 3000
    weekend_days: frozenset[int] = field(default_factory=lambda: frozenset({FRIDAY}))
    start_of_week: int = SATURDAY

    def __post_init__(self) -> None:
        if self.min_year > self.max_year:
            raise ValueError(
                f"min_year ({self.min_year}) must not exceed max_year ({self.max_year})."
            )
        object.__setattr__(self, "weekend_days", frozenset(self.weekend_days))
        bad = [d for d in self.weekend_days if not 1 <= d <= 7]
        if bad:
            raise ValueError(f"Weekend days must be weekday numbers 1..7; got {sorted(bad)}.")
        self.check_start_of_week(self.start_of_week)

    def contains_year(self, year: int) -> bool:
        return self.min_year <= year <= self.max_year

    def check_year(self, year: int) -> None:
        if not self.contains_year(year):
            raise PolicyRangeExceeded(year, self.min_year, self.max_year)

    def check_start_of_week(self, start_of_week: int) -> int:
        if isinstance(start_of_week, bool) or start_of_week not in START_OF_WEEK_CHOICES:
            raise ValueError(
                f"start_of_week must be one of {START_OF_WEEK_CHOICES}; got {start_of_week!r}."
            )
        return start_of_week


DEFAULT_POLICY: Final[CalendarPolicy] = CalendarPolicy()
