"""Shared HTTP helper for the JSON holiday APIs."""

import logging

import requests

from hmcal.errors import ProviderError

logger = logging.getLogger(__name__)


def get_json_list(
    session: requests.Session,
    url: str,
    params: dict | None = None,
    source: str = "provider",
) -> list:
    """
    GET a URL and return its JSON body, which must be a list.

    No retries and no timeout beyond the transport default. Every failure
    is raised as ProviderError.
    """
    logger.debug(f"Fetching {source}: {url} {params or ''}")
    try:
        resp = session.get(url, params=params)
    except requests.RequestException as e:
        raise ProviderError(f"{source} request failed: {e}", url=url) from e

    if not 200 <= resp.status_code < 300:
        raise ProviderError(f"{source} returned an error", status=resp.status_code, url=url)

    try:
        data = resp.json()
    except ValueError as e:
        raise ProviderError(f"{source} returned malformed JSON: {e}", status=resp.status_code, url=url) from e

    if not isinstance(data, list):
        raise ProviderError(
            f"{source} returned {type(data).__name__}, expected a list",
            status=resp.status_code,
            url=url,
        )

    logger.debug(f"{source} returned {len(data)} entries")
    return data
