"""OpenHolidays API adapter - public holidays for any supported country."""

import logging
from datetime import date

import requests

from hmcal.core.holidays import DEFAULT_OFFICIAL_NAME, HolidaySet, normalize

from .http_json import get_json_list

logger = logging.getLogger(__name__)

API_BASE = "https://openholidaysapi.org"
LANGUAGE = "EN"


def _pick_name(names: object) -> str:
    """English name if present, otherwise the first one given."""
    if not isinstance(names, list):
        return DEFAULT_OFFICIAL_NAME
    texts = [n for n in names if isinstance(n, dict) and isinstance(n.get("text"), str)]
    for n in texts:
        if str(n.get("language", "")).upper() == LANGUAGE:
            return n["text"]
    return texts[0]["text"] if texts else DEFAULT_OFFICIAL_NAME


def _parse_date(value: object) -> date | None:
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


class OpenHolidaysAdapter:
    """
    OpenHolidays API adapter.

    Implements HolidayProvider protocol. Names are requested in English.
    """

    def __init__(self, session: requests.Session | None = None):
        self._session = session or requests.Session()

    def fetch_holidays(self, country_code: str, year: int) -> HolidaySet:
        """Fetch public holidays for a country and year."""
        data = get_json_list(
            self._session,
            f"{API_BASE}/PublicHolidays",
            params={
                "countryIsoCode": country_code.upper(),
                "languageIsoCode": LANGUAGE,
                "validFrom": f"{year}-01-01",
                "validTo": f"{year}-12-31",
            },
            source="OpenHolidays",
        )

        entries = []
        for item in data:
            if not isinstance(item, dict):
                continue
            start = _parse_date(item.get("startDate"))
            if start is None:
                continue
            end = _parse_date(item.get("endDate")) or start

            # The query filters by year, but adjacent-year spillover still happens
            if start.year > year or end.year < year or end < start:
                logger.debug(f"Skipping holiday outside {year}: {item.get('startDate')}..{item.get('endDate')}")
                continue

            # The window is validity only; the holiday itself falls on startDate
            entries.append((start.isoformat(), _pick_name(item.get("name"))))

        return HolidaySet(official=normalize(entries))
