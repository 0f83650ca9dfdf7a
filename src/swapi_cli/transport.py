"""HTTP access to the SWAPI `people` resource.

Each call opens its own `requests.Session` and closes it before returning,
whether the request succeeded or not. Responses are returned as raw text;
turning them into records is the decoder's job.
"""
import logging

import requests

from . import config
from .errors import TransportError

LOG = logging.getLogger(__name__)


def _get(path: str, params: dict | None = None, base_url: str | None = None, timeout: float | None = None) -> str:
    """GET `path` under the base URL and return the body text.

    Raises `TransportError` on network failures and on any non-2xx status.
    """
    base_url = (base_url or config.SWAPI_BASE_URL).rstrip("/")
    timeout = timeout if timeout is not None else config.SWAPI_TIMEOUT
    url = f"{base_url}{path}"

    with requests.Session() as session:
        LOG.info("GET %s params=%s", url, params)
        try:
            resp = session.get(url, params=params, timeout=timeout)
        except requests.RequestException as ex:
            LOG.warning("Request to %s failed: %s", url, ex)
            raise TransportError(f"Request to {url} failed: {ex}", url=url) from ex

        if not 200 <= resp.status_code < 300:
            LOG.warning("GET %s returned %s", resp.url, resp.status_code)
            raise TransportError(
                f"Response status code does not indicate success: {resp.status_code} ({resp.reason}).",
                status_code=resp.status_code,
                url=resp.url,
            )
        return resp.text


def fetch_by_id(character_id: str, base_url: str | None = None, timeout: float | None = None) -> str:
    """Return the raw JSON text for `/people/{character_id}`."""
    return _get(f"/people/{character_id}", base_url=base_url, timeout=timeout)


def fetch_search(term: str, base_url: str | None = None, timeout: float | None = None) -> str:
    # requests percent-encodes the term, so spaces and '&' are safe
    return _get("/people/", params={"search": term}, base_url=base_url, timeout=timeout)
