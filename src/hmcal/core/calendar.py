"""Pure calendar grid logic - no I/O dependencies."""

import calendar
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from hmcal.errors import InvalidDateError

from .holidays import HolidaySet

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

WEEKDAY_NAMES = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]


class ViewMode(str, Enum):
    QUARTER = "q"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class View:
    """Which months to show: a quarter, a single month, or the whole year."""

    mode: ViewMode
    number: int | None = None

    @classmethod
    def parse(cls, mode: str, number: int | None = None) -> "View":
        mode = mode.strip().lower()
        if mode == "quarter":
            mode = ViewMode.QUARTER.value
        return cls(ViewMode(mode), number)


@dataclass(frozen=True)
class CalendarCell:
    """A real day in a month grid."""

    date: date
    is_holiday: bool = False
    holiday_names: tuple[str, ...] = ()

    @property
    def weekday(self) -> int:
        """Monday is 0, Sunday is 6."""
        return self.date.weekday()

    @property
    def is_weekend(self) -> bool:
        return self.weekday >= 5


@dataclass
class MonthGrid:
    """One month laid out as Monday-first weeks; None marks a blank slot."""

    year: int
    month: int
    weeks: list[list[CalendarCell | None]] = field(default_factory=list)

    @property
    def name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    @property
    def title(self) -> str:
        return f"{self.name} {self.year}"

    def cells(self) -> list[CalendarCell]:
        """Real days only, in date order."""
        return [c for week in self.weeks for c in week if c is not None]

    def holidays(self) -> list[CalendarCell]:
        return [c for c in self.cells() if c.is_holiday]


def quarter_of(month: int) -> int:
    return (month - 1) // 3 + 1


def months_in_view(view: View, today: date) -> list[int]:
    """
    Months covered by a view.

    A quarter or month without an explicit number follows today's date.
    """
    if view.mode is ViewMode.YEAR:
        return list(range(1, 13))

    if view.mode is ViewMode.MONTH:
        month = view.number if view.number is not None else today.month
        if not 1 <= month <= 12:
            raise InvalidDateError(f"Month must be between 1 and 12, got {month}")
        return [month]

    quarter = view.number if view.number is not None else quarter_of(today.month)
    if not 1 <= quarter <= 4:
        raise InvalidDateError(f"Quarter must be between 1 and 4, got {quarter}")
    first = (quarter - 1) * 3 + 1
    return [first, first + 1, first + 2]


def build_month(holidays: HolidaySet, year: int, month: int) -> MonthGrid:
    """
    Lay out one month, tagging every day that has holidays.

    Pure function - no I/O.
    """
    first_weekday, day_count = calendar.monthrange(year, month)

    slots: list[CalendarCell | None] = [None] * first_weekday
    for day in range(1, day_count + 1):
        names = tuple(r.name for r in holidays.on(month, day))
        slots.append(CalendarCell(date=date(year, month, day), is_holiday=bool(names), holiday_names=names))

    # Pad the last week out to a full row
    slots.extend([None] * (-len(slots) % 7))

    weeks = [slots[i : i + 7] for i in range(0, len(slots), 7)]
    return MonthGrid(year=year, month=month, weeks=weeks)


def render_view(holidays: HolidaySet, view: View, year: int, today: date) -> list[MonthGrid]:
    """Build the month grids for every month in a view."""
    return [build_month(holidays, year, month) for month in months_in_view(view, today)]
