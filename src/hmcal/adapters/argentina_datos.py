"""Argentina-Datos API adapter - national holidays of Argentina."""

import requests

from hmcal.core.holidays import HolidaySet, normalize

from .http_json import get_json_list

API_BASE = "https://api.argentinadatos.com/v1"


class ArgentinaDatosAdapter:
    """
    Argentina-Datos holiday adapter.

    Implements HolidayProvider protocol. The API only knows about
    Argentina, so the country code is ignored.
    """

    def __init__(self, session: requests.Session | None = None):
        self._session = session or requests.Session()

    def fetch_holidays(self, country_code: str, year: int) -> HolidaySet:
        """Fetch Argentina's national holidays for a year."""
        data = get_json_list(self._session, f"{API_BASE}/feriados/{year}", source="Argentina-Datos")
        entries = [
            (item.get("fecha"), item.get("nombre"))
            for item in data
            if isinstance(item, dict)
        ]
        return HolidaySet(official=normalize(entries))
