import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from shamsi.calendar.arithmetic import (
    add_days_to_shamsi_date,
    shamsi_day_of_week,
    shamsi_day_of_year,
    weekday_of_julian_day,
)
from shamsi.calendar.converter import shamsi_to_gregorian, shamsi_to_julian_days
from shamsi.calendar.leap import days_in_shamsi_month, is_shamsi_leap_year
from shamsi.calendar.types import GregorianDate, ShamsiDate, ensure_shamsi
from shamsi.calendar.validation import check_shamsi_date
from shamsi.config import DEFAULT_POLICY, CalendarPolicy

logger = logging.getLogger(__name__)


# ── view records ─────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class DayView:
    shamsi: ShamsiDate
    gregorian: GregorianDate
    weekday: int
    is_weekend: bool
    is_today: bool = False


@dataclass(frozen=True, slots=True)
class WeekView:
    week_number: int
    days: tuple[DayView, ...]

    @property
    def start(self) -> ShamsiDate:
        return self.days[0].shamsi

    @property
    def end(self) -> ShamsiDate:
        return self.days[-1].shamsi


@dataclass(frozen=True, slots=True)
class MonthStatistics:
    total_days: int
    weekdays: int
    weekends: int
    start_weekday: int
    end_weekday: int


@dataclass(frozen=True, slots=True)
class YearStatistics:
    total_days: int
    is_leap_year: bool
    total_weekdays: int
    total_weekends: int


@dataclass(frozen=True, slots=True)
class MonthView:
    year: int
    month: int
    total_days: int
    start_weekday: int
    weeks: tuple[WeekView, ...]
    statistics: MonthStatistics


@dataclass(frozen=True, slots=True)
class MonthSummary:
    month: int
    total_days: int
    start_weekday: int


@dataclass(frozen=True, slots=True)
class YearView:
    year: int
    is_leap_year: bool
    total_days: int
    months: tuple[MonthSummary, ...]
    statistics: YearStatistics


Grid = tuple[tuple[Optional[DayView], ...], ...]


class CalendarViews:
    """
    Week, month and year views over the Shamsi calendar.

    Every entry point checks the year against the policy range and raises
    PolicyRangeExceeded outside it.  Views hold no state of their own; the
    same arguments always produce the same view.
    """

    def __init__(self, policy: Optional[CalendarPolicy] = None) -> None:
        self._policy: CalendarPolicy = policy or DEFAULT_POLICY
        self._weekend: np.ndarray = np.array(sorted(self._policy.weekend_days), dtype=np.int64)

    # ── argument checks ──────────────────────────────────────────────────

    def _start_of_week(self, start_of_week: Optional[int]) -> int:
        if start_of_week is None:
            return self._policy.start_of_week
        return self._policy.check_start_of_week(start_of_week)

    def _check_date(self, date: ShamsiDate) -> ShamsiDate:
        date = ensure_shamsi(date)
        check_shamsi_date(date.year, date.month, date.day)
        self._policy.check_year(date.year)
        return date

    def _check_month(self, year: int, month: int) -> int:
        check_shamsi_date(year, month, 1)
        self._policy.check_year(year)
        return days_in_shamsi_month(year, month)

    # ── primitives ───────────────────────────────────────────────────────

    def week_dates(
        self, date: ShamsiDate, start_of_week: Optional[int] = None
    ) -> tuple[ShamsiDate, ...]:
        date = self._check_date(date)
        start = self._start_of_week(start_of_week)
        weekday = shamsi_day_of_week(date.year, date.month, date.day)
        first = add_days_to_shamsi_date(date, -((weekday - start) % 7))
        return tuple(add_days_to_shamsi_date(first, i) for i in range(7))

    def month_statistics(self, year: int, month: int) -> MonthStatistics:
        total = self._check_month(year, month)
        weekdays = weekday_of_julian_day(
            shamsi_to_julian_days(year, month, np.arange(1, total + 1))
        )
        weekends = int(np.isin(weekdays, self._weekend).sum())
        return MonthStatistics(
            total_days=total,
            weekdays=total - weekends,
            weekends=weekends,
            start_weekday=int(weekdays[0]),
            end_weekday=int(weekdays[-1]),
        )

    def year_statistics(self, year: int) -> YearStatistics:
        months = [self.month_statistics(year, m) for m in range(1, 13)]
        return YearStatistics(
            total_days=sum(s.total_days for s in months),
            is_leap_year=is_shamsi_leap_year(year),
            total_weekdays=sum(s.weekdays for s in months),
            total_weekends=sum(s.weekends for s in months),
        )

    # ── views ────────────────────────────────────────────────────────────

    def day_view(self, date: ShamsiDate, today: Optional[ShamsiDate] = None) -> DayView:
        return self._day_view_unchecked(self._check_date(date), today)

    def week_number(self, date: ShamsiDate, start_of_week: Optional[int] = None) -> int:
        """
        1-based index of the week row holding ``date`` when the year is laid
        out in weeks starting on ``start_of_week``.
        """
        date = self._check_date(date)
        start = self._start_of_week(start_of_week)
        lead = (shamsi_day_of_week(date.year, 1, 1) - start) % 7
        return (shamsi_day_of_year(date) - 1 + lead) // 7 + 1

    def week_view(
        self,
        date: ShamsiDate,
        start_of_week: Optional[int] = None,
        today: Optional[ShamsiDate] = None,
    ) -> WeekView:
        dates = self.week_dates(date, start_of_week)
        logger.debug("week view for %s starting %s", date, dates[0])
        return WeekView(
            week_number=self.week_number(date, start_of_week),
            days=tuple(self._day_view_unchecked(d, today) for d in dates),
        )

    def month_view(
        self,
        year: int,
        month: int,
        start_of_week: Optional[int] = None,
        today: Optional[ShamsiDate] = None,
    ) -> MonthView:
        total = self._check_month(year, month)
        last = ShamsiDate(year, month, total)
        weeks = []
        anchor = ShamsiDate(year, month, 1)
        while anchor <= last:
            week = self.week_view(anchor, start_of_week, today)
            weeks.append(week)
            anchor = add_days_to_shamsi_date(week.end, 1)
        statistics = self.month_statistics(year, month)
        logger.debug("month view %d-%02d: %d weeks", year, month, len(weeks))
        return MonthView(
            year=year,
            month=month,
            total_days=total,
            start_weekday=statistics.start_weekday,
            weeks=tuple(weeks),
            statistics=statistics,
        )

    def year_view(self, year: int) -> YearView:
        self._policy.check_year(year)
        months = tuple(
            MonthSummary(
                month=m,
                total_days=days_in_shamsi_month(year, m),
                start_weekday=shamsi_day_of_week(year, m, 1),
            )
            for m in range(1, 13)
        )
        statistics = self.year_statistics(year)
        return YearView(
            year=year,
            is_leap_year=statistics.is_leap_year,
            total_days=statistics.total_days,
            months=months,
            statistics=statistics,
        )

    def month_grid(
        self,
        year: int,
        month: int,
        start_of_week: Optional[int] = None,
        include_padding: bool = True,
        today: Optional[ShamsiDate] = None,
    ) -> Grid:
        """
        Rows of 7 cells: ``None`` padding before day 1 so that column 0 is
        ``start_of_week``, one DayView per day, then ``None`` padding to
        close the last row.  With ``include_padding=False`` the padding
        cells are dropped and the first and last rows may be short.
        """
        total = self._check_month(year, month)
        start = self._start_of_week(start_of_week)
        lead = (shamsi_day_of_week(year, month, 1) - start) % 7
        trail = -(lead + total) % 7

        cells: list[Optional[DayView]] = [None] * lead
        cells.extend(
            self._day_view_unchecked(ShamsiDate(year, month, d), today)
            for d in range(1, total + 1)
        )
        cells.extend([None] * trail)
        rows = [tuple(cells[i:i + 7]) for i in range(0, len(cells), 7)]
        logger.debug(
            "month grid %d-%02d: lead=%d trail=%d rows=%d", year, month, lead, trail, len(rows)
        )
        if include_padding:
            return tuple(rows)
        return tuple(
            row for row in (tuple(c for c in r if c is not None) for r in rows) if row
        )

    # ── internals ────────────────────────────────────────────────────────

    def _day_view_unchecked(self, date: ShamsiDate, today: Optional[ShamsiDate]) -> DayView:
        # Neighbouring days of an in-range week may fall one year outside the
        # policy range at its edges; they are still rendered.
        weekday = shamsi_day_of_week(date.year, date.month, date.day)
        return DayView(
            shamsi=date,
            gregorian=shamsi_to_gregorian(date),
            weekday=weekday,
            is_weekend=weekday in self._policy.weekend_days,
            is_today=today is not None and ensure_shamsi(today) == date,
        )

    @property
    def policy(self) -> CalendarPolicy:
        return self._policy

    def __repr__(self) -> str:
        p = self._policy
        return (
            f"CalendarViews(years=[{p.min_year}, {p.max_year}], "
            f"weekend={sorted(p.weekend_days)}, "
            f"start_of_week={p.start_of_week})"
        )
