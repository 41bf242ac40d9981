"""
tests/views/test_views.py

Covers:
  - week_dates: seven consecutive dates, starting weekday, containment
  - Week numbers within the year
  - Month and year statistics (default and custom weekend)
  - Day, week, month and year views
  - Month grid padding for each start-of-week choice
  - Policy range and start-of-week validation
"""

import numpy as np
import pytest

from shamsi.calendar import (
    GregorianDate,
    InvalidDate,
    InvalidMonth,
    PolicyRangeExceeded,
    ShamsiDate,
    add_days_to_shamsi_date,
    days_in_shamsi_month,
    shamsi_day_of_week,
    shamsi_to_julian_day,
)
from shamsi.config import CalendarPolicy
from shamsi.views import CalendarViews, default_views


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def cv():
    return CalendarViews()


@pytest.fixture
def two_day_weekend():
    return CalendarViews(CalendarPolicy(weekend_days={6, 7}))


@pytest.fixture
def nowruz_1403():
    return ShamsiDate(1403, 1, 1)


# ── Week dates ────────────────────────────────────────────────────────────────

class TestWeekDates:

    def test_week_of_nowruz_1403(self, cv, nowruz_1403):
        week = cv.week_dates(nowruz_1403)
        assert week == (
            ShamsiDate(1402, 12, 26),
            ShamsiDate(1402, 12, 27),
            ShamsiDate(1402, 12, 28),
            ShamsiDate(1402, 12, 29),
            ShamsiDate(1403, 1, 1),
            ShamsiDate(1403, 1, 2),
            ShamsiDate(1403, 1, 3),
        )

    def test_monday_start(self, cv, nowruz_1403):
        week = cv.week_dates(nowruz_1403, start_of_week=3)
        assert week[0] == ShamsiDate(1402, 12, 28)
        assert week[-1] == ShamsiDate(1403, 1, 5)

    @pytest.mark.parametrize("start", [1, 2, 3])
    def test_properties_hold_for_random_dates(self, cv, start):
        rng = np.random.default_rng(start)
        for _ in range(200):
            y = int(rng.integers(2, 3000))
            m = int(rng.integers(1, 13))
            d = int(rng.integers(1, days_in_shamsi_month(y, m) + 1))
            date = ShamsiDate(y, m, d)
            week = cv.week_dates(date, start)
            assert len(week) == 7
            assert date in week
            assert shamsi_day_of_week(*week[0].as_tuple()) == start
            jds = [shamsi_to_julian_day(*w.as_tuple()) for w in week]
            assert jds == list(range(jds[0], jds[0] + 7))

    def test_first_year_reaches_back_into_year_zero(self, cv):
        assert cv.week_dates(ShamsiDate(1, 1, 1))[0] == ShamsiDate(0, 12, 25)

    def test_invalid_start_of_week_raises(self, cv, nowruz_1403):
        with pytest.raises(ValueError):
            cv.week_dates(nowruz_1403, start_of_week=4)

    def test_out_of_range_year_raises(self, cv):
        with pytest.raises(PolicyRangeExceeded):
            cv.week_dates(ShamsiDate(3001, 1, 1))

    def test_invalid_date_raises(self, cv):
        with pytest.raises(InvalidDate):
            cv.week_dates(ShamsiDate(1404, 12, 30))

    def test_rejects_gregorian(self, cv):
        with pytest.raises(TypeError):
            cv.week_dates(GregorianDate(2024, 3, 20))


# ── Week numbers ──────────────────────────────────────────────────────────────

class TestWeekNumber:

    def test_first_partial_week(self, cv, nowruz_1403):
        assert cv.week_number(nowruz_1403) == 1
        assert cv.week_number(ShamsiDate(1403, 1, 3)) == 1

    def test_second_week_starts_on_saturday(self, cv):
        assert cv.week_number(ShamsiDate(1403, 1, 4)) == 2

    def test_week_number_matches_week_dates(self, cv):
        for doy_offset in range(0, 366, 5):
            date = add_days_to_shamsi_date(ShamsiDate(1403, 1, 1), doy_offset)
            first_of_week = cv.week_dates(date)[0]
            if first_of_week.year == 1403:
                assert cv.week_number(first_of_week) == cv.week_number(date)


# ── Statistics ────────────────────────────────────────────────────────────────

class TestStatistics:

    def test_month_statistics_farvardin_1403(self, cv):
        s = cv.month_statistics(1403, 1)
        assert (s.total_days, s.weekdays, s.weekends, s.start_weekday, s.end_weekday) == (
            31, 26, 5, 5, 7
        )

    def test_month_statistics_esfand_1403(self, cv):
        s = cv.month_statistics(1403, 12)
        assert (s.total_days, s.weekdays, s.weekends, s.start_weekday, s.end_weekday) == (
            30, 26, 4, 5, 6
        )

    def test_custom_weekend(self, two_day_weekend):
        s = two_day_weekend.month_statistics(1403, 1)
        assert s.weekends == 10
        assert s.weekdays == 21

    def test_counts_add_up_every_month(self, cv):
        for year in (1, 1403, 1404, 3000):
            for month in range(1, 13):
                s = cv.month_statistics(year, month)
                assert s.weekdays + s.weekends == s.total_days
                assert s.total_days == days_in_shamsi_month(year, month)

    def test_year_statistics(self, cv):
        leap = cv.year_statistics(1403)
        assert (leap.total_days, leap.is_leap_year, leap.total_weekdays, leap.total_weekends) == (
            366, True, 314, 52
        )
        common = cv.year_statistics(1404)
        assert (common.total_days, common.is_leap_year) == (365, False)
        assert (common.total_weekdays, common.total_weekends) == (312, 53)

    def test_non_integer_year_raises_invalid_date(self, cv):
        with pytest.raises(InvalidDate):
            cv.month_statistics("1403", 1)
        with pytest.raises(InvalidDate):
            cv.month_grid(1403.0, 1)

    def test_bad_month_raises(self, cv):
        with pytest.raises(InvalidMonth):
            cv.month_statistics(1403, 13)

    @pytest.mark.parametrize("year", [0, 3001])
    def test_year_outside_policy_raises(self, cv, year):
        with pytest.raises(PolicyRangeExceeded) as info:
            cv.year_statistics(year)
        assert info.value.year == year
        assert (info.value.min_year, info.value.max_year) == (1, 3000)


# ── Day and week views ────────────────────────────────────────────────────────

class TestDayAndWeekViews:

    def test_day_view(self, cv):
        view = cv.day_view(ShamsiDate(1403, 1, 3))
        assert view.gregorian == GregorianDate(2024, 3, 22)
        assert view.weekday == 7
        assert view.is_weekend
        assert not view.is_today

    def test_day_view_today_flag(self, cv, nowruz_1403):
        assert cv.day_view(nowruz_1403, today=nowruz_1403).is_today

    def test_week_view(self, cv, nowruz_1403):
        week = cv.week_view(nowruz_1403, today=nowruz_1403)
        assert week.week_number == 1
        assert week.start == ShamsiDate(1402, 12, 26)
        assert week.end == ShamsiDate(1403, 1, 3)
        assert [d.weekday for d in week.days] == [1, 2, 3, 4, 5, 6, 7]
        assert [d.is_today for d in week.days].count(True) == 1
        assert [d.is_weekend for d in week.days] == [False] * 6 + [True]


# ── Month and year views ──────────────────────────────────────────────────────

class TestMonthAndYearViews:

    def test_month_view_farvardin_1403(self, cv):
        view = cv.month_view(1403, 1)
        assert view.total_days == 31
        assert view.start_weekday == 5
        assert len(view.weeks) == 5
        assert view.weeks[0].start == ShamsiDate(1402, 12, 26)
        assert view.weeks[-1].end == ShamsiDate(1403, 1, 31)

    def test_month_view_covers_every_day_once(self, cv):
        for month in range(1, 13):
            view = cv.month_view(1404, month, start_of_week=2)
            in_month = [
                d.shamsi for w in view.weeks for d in w.days
                if (d.shamsi.year, d.shamsi.month) == (1404, month)
            ]
            assert in_month == [ShamsiDate(1404, month, d) for d in range(1, view.total_days + 1)]

    def test_year_view(self, cv):
        view = cv.year_view(1403)
        assert view.is_leap_year
        assert view.total_days == 366
        assert [m.total_days for m in view.months] == [31] * 6 + [30] * 6
        assert view.months[0].start_weekday == 5
        assert view.months[6].start_weekday == 2
        assert view.statistics.total_weekends == 52

    def test_year_view_outside_policy_raises(self, cv):
        with pytest.raises(PolicyRangeExceeded):
            cv.year_view(3001)


# ── Month grid ────────────────────────────────────────────────────────────────

class TestMonthGrid:

    def test_saturday_start(self, cv):
        grid = cv.month_grid(1403, 1)
        assert len(grid) == 5
        assert all(len(row) == 7 for row in grid)
        assert grid[0][:4] == (None, None, None, None)
        assert grid[0][4].shamsi == ShamsiDate(1403, 1, 1)
        assert grid[-1][-1].shamsi == ShamsiDate(1403, 1, 31)

    def test_monday_start(self, cv):
        grid = cv.month_grid(1403, 1, start_of_week=3)
        assert grid[0][:2] == (None, None)
        assert grid[0][2].shamsi == ShamsiDate(1403, 1, 1)
        assert grid[-1][-2:] == (None, None)

    def test_without_padding(self, cv):
        grid = cv.month_grid(1403, 1, include_padding=False)
        assert len(grid[0]) == 3
        assert all(cell is not None for row in grid for cell in row)
        assert sum(len(row) for row in grid) == 31

    @pytest.mark.parametrize("start", [1, 2, 3])
    def test_columns_line_up_with_weekdays(self, cv, start):
        for month in range(1, 13):
            for row in cv.month_grid(1404, month, start_of_week=start):
                for col, cell in enumerate(row):
                    if cell is not None:
                        assert cell.weekday == (start - 1 + col) % 7 + 1

    def test_today_marked(self, cv, nowruz_1403):
        grid = cv.month_grid(1403, 1, today=nowruz_1403)
        marked = [c for row in grid for c in row if c is not None and c.is_today]
        assert [c.shamsi for c in marked] == [nowruz_1403]


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    def test_default_instance(self):
        assert isinstance(default_views, CalendarViews)
        assert default_views.policy.max_year == 3000

    def test_policy_start_of_week_is_the_default(self, nowruz_1403):
        monday_first = CalendarViews(CalendarPolicy(start_of_week=3))
        assert monday_first.week_dates(nowruz_1403)[0] == ShamsiDate(1402, 12, 28)

    def test_narrow_policy(self):
        narrow = CalendarViews(CalendarPolicy(min_year=1400, max_year=1410))
        narrow.month_view(1405, 6)
        with pytest.raises(PolicyRangeExceeded):
            narrow.month_view(1399, 1)

    def test_repr(self, cv):
        assert repr(cv) == "CalendarViews(years=[1, 3000], weekend=[7], start_of_week=1)"
