"""Pure holiday domain logic - no I/O dependencies."""

import calendar
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from hmcal.errors import InvalidCountryError

DEFAULT_OFFICIAL_NAME = "Public holiday"
DEFAULT_CUSTOM_NAME = "Custom holiday"

# Any leap year works: records carry no year, so Feb 29 must be representable.
_LEAP_YEAR = 2000


class Origin(str, Enum):
    """Where a holiday record came from."""

    OFFICIAL = "official"
    CUSTOM = "custom"


@dataclass(frozen=True)
class HolidayRecord:
    """A holiday on a given day of the year."""

    month: int
    day: int
    name: str
    origin: Origin = Origin.OFFICIAL

    def __post_init__(self):
        if not is_valid_day_month(self.day, self.month):
            raise ValueError(f"Invalid holiday date: day={self.day}, month={self.month}")

    @property
    def is_custom(self) -> bool:
        return self.origin is Origin.CUSTOM

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "day": self.day,
            "name": self.name,
            "origin": self.origin.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HolidayRecord":
        # bool is an int subclass, but JSON true/false is not a day or month
        if any(not isinstance(data[k], int) or isinstance(data[k], bool) for k in ("month", "day")):
            raise TypeError("month and day must be integers")
        if not isinstance(data["name"], str):
            raise TypeError("name must be a string")
        return cls(
            month=data["month"],
            day=data["day"],
            name=data["name"],
            origin=Origin(data["origin"]),
        )


def _sort_key(record: HolidayRecord) -> tuple[int, int, int]:
    return (record.month, record.day, 0 if record.origin is Origin.OFFICIAL else 1)


@dataclass
class HolidaySet:
    """
    All holidays for one (provider, year) cache key.

    Stored partitioned by origin; flattened by records() for display.
    """

    official: list[HolidayRecord] = field(default_factory=list)
    custom: list[HolidayRecord] = field(default_factory=list)

    def records(self) -> list[HolidayRecord]:
        """All records sorted by date, official before custom on the same day."""
        return sorted([*self.official, *self.custom], key=_sort_key)

    def on(self, month: int, day: int) -> list[HolidayRecord]:
        """Records falling on a date, official first."""
        return [r for r in self.records() if r.month == month and r.day == day]

    def custom_at(self, month: int, day: int) -> HolidayRecord | None:
        return next((r for r in self.custom if r.month == month and r.day == day), None)

    def is_empty(self) -> bool:
        return not self.official and not self.custom

    def to_dict(self) -> dict:
        return {"holidays": [r.to_dict() for r in self.records()]}

    @classmethod
    def from_dict(cls, data: dict) -> "HolidaySet":
        holidays = cls()
        seen: set[tuple[int, int, Origin]] = set()
        for item in data["holidays"]:
            record = HolidayRecord.from_dict(item)
            slot = (record.month, record.day, record.origin)
            if slot in seen:
                raise ValueError(f"Duplicate {record.origin.value} holiday on {record.day}/{record.month}")
            seen.add(slot)
            if record.is_custom:
                holidays.custom.append(record)
            else:
                holidays.official.append(record)
        return holidays


class ProviderKind(str, Enum):
    """The closed set of remote holiday sources."""

    ARGENTINA_DATOS = "argentina-datos"
    OPEN_HOLIDAYS = "openholidays"


@dataclass(frozen=True)
class Provider:
    """A holiday source bound to the country it serves."""

    kind: ProviderKind
    country_code: str

    @classmethod
    def from_country(cls, country: str | None) -> "Provider":
        """
        Select the provider for an ISO country code.

        None or "AR" selects Argentina-Datos; any other 2-3 letter code
        selects OpenHolidays.
        """
        if country is None:
            return cls(ProviderKind.ARGENTINA_DATOS, "AR")

        code = country.strip().upper()
        if not code:
            raise InvalidCountryError("--country cannot be empty")
        if not 2 <= len(code) <= 3:
            raise InvalidCountryError("--country must be a 2- or 3-letter ISO code")
        if not (code.isascii() and code.isalpha()):
            raise InvalidCountryError("--country must contain only ASCII letters")

        if code == "AR":
            return cls(ProviderKind.ARGENTINA_DATOS, "AR")
        return cls(ProviderKind.OPEN_HOLIDAYS, code)

    @property
    def slug(self) -> str:
        return self.country_code.lower()


@dataclass(frozen=True)
class CacheKey:
    """Identifies one persisted HolidaySet."""

    provider: Provider
    year: int

    @property
    def filename(self) -> str:
        return f"hm-{self.provider.slug}-{self.year}"


def is_valid_day_month(day: int, month: int, year: int | None = None) -> bool:
    """
    Check that (day, month) is a real date.

    Without a year, Feb 29 is accepted.
    """
    if not 1 <= month <= 12:
        return False
    days = calendar.monthrange(year if year is not None else _LEAP_YEAR, month)[1]
    return 1 <= day <= days


def parse_iso_day_month(value: object) -> tuple[int, int] | None:
    """Parse "YYYY-MM-DD" into (month, day), or None if it is not a valid date."""
    if not isinstance(value, str):
        return None
    parts = value.strip().split("-", 2)
    if len(parts) != 3:
        return None
    _, month_str, day_str = parts
    # Tolerate a time suffix like "2025-01-01T00:00:00"
    day_str = day_str.split("T", 1)[0]
    if not (month_str.isdigit() and day_str.isdigit()):
        return None
    month, day = int(month_str), int(day_str)
    if not is_valid_day_month(day, month):
        return None
    return month, day


def normalize(entries: Iterable[tuple[str, str]]) -> list[HolidayRecord]:
    """
    Turn (iso_date, name) pairs from a provider into official records.

    Pure function - no I/O.

    Entries with unparseable dates are dropped, identical (date, name)
    entries are collapsed, and distinct names on one date are joined so
    each date holds a single official record.
    """
    names_by_date: dict[tuple[int, int], list[str]] = {}
    for raw_date, raw_name in entries:
        parsed = parse_iso_day_month(raw_date)
        if parsed is None:
            continue
        name = raw_name.strip() if isinstance(raw_name, str) else ""
        names = names_by_date.setdefault(parsed, [])
        if (name or DEFAULT_OFFICIAL_NAME) not in names:
            names.append(name or DEFAULT_OFFICIAL_NAME)

    return [
        HolidayRecord(month=month, day=day, name=" / ".join(names), origin=Origin.OFFICIAL)
        for (month, day), names in sorted(names_by_date.items())
    ]
