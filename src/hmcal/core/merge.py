"""Pure merge rules between official and custom holidays - no I/O."""

from hmcal.errors import InvalidDateError, NotFoundError

from .holidays import DEFAULT_CUSTOM_NAME, HolidayRecord, HolidaySet, Origin, is_valid_day_month


def validate_day_month(day: int, month: int, year: int | None = None) -> None:
    """Reject a user-supplied date before any I/O happens."""
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Month must be between 1 and 12, got {month}")
    if not is_valid_day_month(day, month, year):
        where = f"{month:02d}/{year}" if year is not None else f"month {month}"
        raise InvalidDateError(f"Day {day} does not exist in {where}")


def upsert_custom(holidays: HolidaySet, day: int, month: int, name: str | None = None) -> HolidaySet:
    """
    Return a copy with a custom record at (month, day).

    Replaces any custom record already on that date. Official records
    are left untouched, even on the same date.
    """
    record = HolidayRecord(
        month=month,
        day=day,
        name=(name or "").strip() or DEFAULT_CUSTOM_NAME,
        origin=Origin.CUSTOM,
    )
    custom = [r for r in holidays.custom if (r.month, r.day) != (month, day)]
    custom.append(record)
    custom.sort(key=lambda r: (r.month, r.day))
    return HolidaySet(official=list(holidays.official), custom=custom)


def remove_custom(holidays: HolidaySet, day: int, month: int) -> HolidaySet:
    """
    Return a copy without the custom record at (month, day).

    Official holidays cannot be removed; asking to is reported the same
    way as a date with nothing on it.
    """
    if holidays.custom_at(month, day) is None:
        raise NotFoundError(f"No custom holiday on {day:02d}/{month:02d}")
    custom = [r for r in holidays.custom if (r.month, r.day) != (month, day)]
    return HolidaySet(official=list(holidays.official), custom=custom)


def replace_official(previous: HolidaySet | None, fetched: HolidaySet) -> HolidaySet:
    """Take official records from a fresh fetch and custom ones from the prior cache."""
    custom = list(previous.custom) if previous is not None else []
    return HolidaySet(official=list(fetched.official), custom=custom)
