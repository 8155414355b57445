"""Shared workflow layer between the CLI and the holiday cache.

Loads, fetches, and mutates the HolidaySet for a cache key. The store and
the clock are passed in so every step can run against a temp directory.
"""

import logging
from datetime import date
from typing import Callable

from .adapters.argentina_datos import ArgentinaDatosAdapter
from .adapters.file_cache import FileHolidayStore
from .adapters.openholidays import OpenHolidaysAdapter
from .config import Config
from .core.holidays import CacheKey, HolidaySet, Provider, ProviderKind
from .core.merge import remove_custom, replace_official, upsert_custom, validate_day_month
from .errors import NotFoundError
from .ports import HolidayProvider, HolidayStore

logger = logging.getLogger(__name__)

FetchFn = Callable[[], HolidaySet]


def get_store(config: Config) -> FileHolidayStore:
    """Resolve the cache directory from config."""
    return FileHolidayStore(config.cache_path)


def get_client(provider: Provider) -> HolidayProvider:
    """Pick the remote client serving a provider."""
    if provider.kind is ProviderKind.ARGENTINA_DATOS:
        return ArgentinaDatosAdapter()
    return OpenHolidaysAdapter()


def resolve_key(country: str | None, year: int | None = None, today: date | None = None) -> CacheKey:
    """Cache key for a country, defaulting to the current year."""
    provider = Provider.from_country(country)
    if year is None:
        year = (today or date.today()).year
    return CacheKey(provider=provider, year=year)


def fetcher(key: CacheKey, client: HolidayProvider | None = None) -> FetchFn:
    """Build the fetch callable for a cache key."""
    client = client or get_client(key.provider)

    def fetch() -> HolidaySet:
        logger.info(f"Fetching {key.provider.kind.value} holidays for {key.provider.country_code} {key.year}")
        return client.fetch_holidays(key.provider.country_code, key.year)

    return fetch


# ============== Merge Engine ==============


def _load_or_build(store: HolidayStore, key: CacheKey, fetch_fn: FetchFn) -> tuple[HolidaySet, bool]:
    """Cached set, or a freshly fetched one; the flag tells whether it was fetched."""
    cached = store.load(key)
    if cached is not None:
        logger.debug(f"Cache hit for {key.filename}")
        return cached, False

    logger.debug(f"Cache miss for {key.filename}")
    return replace_official(None, fetch_fn()), True


def load_or_fetch(store: HolidayStore, key: CacheKey, fetch_fn: FetchFn) -> HolidaySet:
    """Return the cached set, fetching and caching it on a miss."""
    holidays, fetched = _load_or_build(store, key, fetch_fn)
    if fetched:
        store.save(key, holidays)
    return holidays


def refresh(store: HolidayStore, key: CacheKey, fetch_fn: FetchFn) -> HolidaySet:
    """Refetch official holidays, keeping custom ones from the cache."""
    previous = store.load(key)
    holidays = replace_official(previous, fetch_fn())
    store.save(key, holidays)
    return holidays


def add_holiday(
    store: HolidayStore,
    key: CacheKey,
    day: int,
    month: int,
    fetch_fn: FetchFn,
    name: str | None = None,
) -> HolidaySet:
    """Add or rename the custom holiday on a date."""
    validate_day_month(day, month, key.year)
    current, _ = _load_or_build(store, key, fetch_fn)
    holidays = upsert_custom(current, day, month, name)
    store.save(key, holidays)
    return holidays


def delete_holiday(store: HolidayStore, key: CacheKey, day: int, month: int) -> HolidaySet:
    """Remove the custom holiday on a date."""
    validate_day_month(day, month, key.year)
    current = store.load(key)
    if current is None:
        raise NotFoundError(f"No custom holiday on {day:02d}/{month:02d}")
    holidays = remove_custom(current, day, month)
    store.save(key, holidays)
    return holidays
