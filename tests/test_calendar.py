"""Tests for calendar grid logic."""

from datetime import date

import pytest

from hmcal.core.calendar import (
    CalendarCell,
    View,
    ViewMode,
    build_month,
    months_in_view,
    quarter_of,
    render_view,
)
from hmcal.core.holidays import HolidayRecord, HolidaySet, Origin
from hmcal.errors import InvalidDateError


@pytest.fixture
def holidays():
    return HolidaySet(
        official=[
            HolidayRecord(1, 1, "New Year's Day"),
            HolidayRecord(2, 29, "Leap official"),
            HolidayRecord(12, 25, "Christmas Day"),
        ],
        custom=[HolidayRecord(12, 25, "Family lunch", Origin.CUSTOM)],
    )


class TestView:
    def test_parse_modes(self):
        assert View.parse("q").mode is ViewMode.QUARTER
        assert View.parse("Quarter").mode is ViewMode.QUARTER
        assert View.parse("month", 3) == View(ViewMode.MONTH, 3)
        assert View.parse("YEAR").mode is ViewMode.YEAR

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            View.parse("week")


class TestMonthsInView:
    @pytest.mark.parametrize(
        "month,expected",
        [(1, [1, 2, 3]), (3, [1, 2, 3]), (4, [4, 5, 6]), (8, [7, 8, 9]), (12, [10, 11, 12])],
    )
    def test_default_quarter_follows_today(self, month, expected):
        assert months_in_view(View(ViewMode.QUARTER), date(2025, month, 15)) == expected

    def test_explicit_quarter(self):
        assert months_in_view(View(ViewMode.QUARTER, 2), date(2025, 11, 1)) == [4, 5, 6]

    def test_month_defaults_to_today(self):
        assert months_in_view(View(ViewMode.MONTH), date(2025, 7, 4)) == [7]

    def test_explicit_month(self):
        assert months_in_view(View(ViewMode.MONTH, 2), date(2025, 7, 4)) == [2]

    def test_year(self):
        assert months_in_view(View(ViewMode.YEAR), date(2025, 7, 4)) == list(range(1, 13))

    @pytest.mark.parametrize("view", [View(ViewMode.QUARTER, 5), View(ViewMode.QUARTER, 0), View(ViewMode.MONTH, 13)])
    def test_out_of_range(self, view):
        with pytest.raises(InvalidDateError):
            months_in_view(view, date(2025, 1, 1))

    def test_quarter_of(self):
        assert [quarter_of(m) for m in range(1, 13)] == [1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4]


class TestBuildMonth:
    def test_weekday_alignment(self, holidays):
        # 1 Jan 2025 is a Wednesday
        grid = build_month(holidays, 2025, 1)
        assert grid.weeks[0][:2] == [None, None]
        assert grid.weeks[0][2].date == date(2025, 1, 1)
        assert grid.weeks[0][2].weekday == 2

    def test_rows_are_full_weeks(self, holidays):
        grid = build_month(holidays, 2025, 3)
        assert all(len(week) == 7 for week in grid.weeks)
        assert len(grid.cells()) == 31

    def test_month_starting_on_monday_has_no_leading_blank(self, holidays):
        # 1 Sep 2025 is a Monday
        grid = build_month(holidays, 2025, 9)
        assert grid.weeks[0][0].date == date(2025, 9, 1)

    def test_trailing_blanks(self, holidays):
        # 30 Nov 2025 is a Sunday, so no trailing blanks
        assert build_month(holidays, 2025, 11).weeks[-1][-1].date == date(2025, 11, 30)
        # 31 Dec 2025 is a Wednesday
        assert build_month(holidays, 2025, 12).weeks[-1][3:] == [None, None, None, None]

    def test_holiday_cells(self, holidays):
        grid = build_month(holidays, 2025, 12)
        christmas = grid.cells()[24]
        assert christmas.is_holiday is True
        assert christmas.holiday_names == ("Christmas Day", "Family lunch")
        assert grid.cells()[0].is_holiday is False
        assert [c.date.day for c in grid.holidays()] == [25]

    def test_title(self, holidays):
        assert build_month(holidays, 1970, 1).title == "January 1970"

    def test_weekend(self):
        assert CalendarCell(date(2025, 1, 4)).is_weekend is True
        assert CalendarCell(date(2025, 1, 6)).is_weekend is False


class TestRenderView:
    def test_leap_year_has_feb_29(self, holidays):
        grids = render_view(holidays, View(ViewMode.YEAR), 2024, date(2024, 6, 1))
        february = grids[1]
        assert len(february.cells()) == 29
        assert february.cells()[-1].date == date(2024, 2, 29)
        assert february.cells()[-1].holiday_names == ("Leap official",)

    def test_non_leap_year_has_no_feb_29(self, holidays):
        grids = render_view(holidays, View(ViewMode.YEAR), 2023, date(2023, 6, 1))
        february = grids[1]
        assert len(february.cells()) == 28
        assert february.cells()[-1].date == date(2023, 2, 28)
        assert february.holidays() == []

    def test_year_covers_all_days(self, holidays):
        grids = render_view(holidays, View(ViewMode.YEAR), 2024, date(2024, 6, 1))
        assert len(grids) == 12
        assert sum(len(g.cells()) for g in grids) == 366

    def test_quarter_view(self, holidays):
        grids = render_view(holidays, View(ViewMode.QUARTER), 2025, date(2025, 11, 3))
        assert [g.month for g in grids] == [10, 11, 12]
        assert all(g.year == 2025 for g in grids)

    def test_month_view(self, holidays):
        grids = render_view(holidays, View(ViewMode.MONTH, 1), 2025, date(2025, 11, 3))
        assert len(grids) == 1
        assert grids[0].cells()[0].holiday_names == ("New Year's Day",)
