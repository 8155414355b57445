"""Holiday provider interface."""

from typing import Protocol

from hmcal.core.holidays import HolidaySet


class HolidayProvider(Protocol):
    """Interface for fetching official holidays from any remote source."""

    def fetch_holidays(self, country_code: str, year: int) -> HolidaySet:
        """Fetch official holidays for a country and year. Never caches."""
        ...
