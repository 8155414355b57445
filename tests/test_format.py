"""Tests for terminal formatting."""

from datetime import date

import click

from hmcal.core.calendar import build_month
from hmcal.core.holidays import HolidayRecord, HolidaySet, Origin
from hmcal.format import concat_months, format_calendar, format_listing, format_month


def test_format_listing_table_tags_origin():
    records = [
        HolidayRecord(1, 1, "New Year's Day"),
        HolidayRecord(12, 24, "Family dinner", Origin.CUSTOM),
    ]
    assert format_listing(records, 2024) == (
        "2024-01-01  New Year's Day [official]\n"
        "2024-12-24  Family dinner [custom]"
    )


def test_format_listing_json_empty():
    assert format_listing([], 2024, "json") == "[]"


def test_format_listing_markdown_escapes_pipes():
    output = format_listing([HolidayRecord(3, 3, "A|B", Origin.CUSTOM)], 2024, "markdown")
    assert output.splitlines()[-1] == "| 2024-03-03 | A\\|B | custom |"


class TestFormatMonth:
    def test_layout(self):
        lines = [click.unstyle(line) for line in format_month(build_month(HolidaySet(), 2024, 2))]
        assert lines[0] == "   February 2024"
        assert lines[1] == "Mo Tu We Th Fr Sa Su"
        # 1 Feb 2024 is a Thursday
        assert lines[2] == "          1  2  3  4"
        assert lines[-1] == "26 27 28 29"

    def test_no_feb_29_in_2023(self):
        lines = [click.unstyle(line) for line in format_month(build_month(HolidaySet(), 2023, 2))]
        assert lines[-1] == "27 28"

    def test_holiday_is_highlighted(self):
        holidays = HolidaySet(official=[HolidayRecord(2, 14, "Valentine's")])
        lines = format_month(build_month(holidays, 2024, 2))
        assert click.style("14", fg="red", bold=True) in "\n".join(lines)

    def test_weekend_is_red(self):
        lines = format_month(build_month(HolidaySet(), 2024, 2))
        # 3 Feb 2024 is a Saturday
        assert click.style(" 3", fg="red") in lines[2]

    def test_today_is_reversed(self):
        lines = format_month(build_month(HolidaySet(), 2024, 2), today=date(2024, 2, 13))
        assert click.style("13", reverse=True) in "\n".join(lines)


def test_concat_months_pads_styled_text():
    rows = concat_months([[click.style("ab", fg="red")], ["cd"]])
    assert click.unstyle(rows[0]) == "ab" + " " * 18 + "   cd"


def test_format_calendar_appends_legend():
    holidays = HolidaySet(
        official=[HolidayRecord(12, 25, "Christmas Day")],
        custom=[HolidayRecord(12, 25, "Family lunch", Origin.CUSTOM)],
    )
    output = click.unstyle(format_calendar([build_month(holidays, 2025, 12)]))
    assert output.splitlines()[-1] == "25 Dec  Christmas Day, Family lunch"
