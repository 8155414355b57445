"""Holiday cache storage interface."""

from typing import Protocol

from hmcal.core.holidays import CacheKey, HolidaySet


class HolidayStore(Protocol):
    """Interface for persisting one HolidaySet per cache key."""

    def load(self, key: CacheKey) -> HolidaySet | None:
        """Load the set for a key. Returns None if it must be fetched."""
        ...

    def save(self, key: CacheKey, holidays: HolidaySet) -> None:
        """Persist the set for a key, replacing what was there."""
        ...

    def delete(self, key: CacheKey) -> None:
        """Remove the set for a key. Missing entries are ignored."""
        ...
