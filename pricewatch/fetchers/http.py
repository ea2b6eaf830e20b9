"""Plain HTTP page fetcher."""

import logging

import requests

from pricewatch.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "es-ES,es;q=0.9,en-US;q=0.8,en;q=0.7",
}


def fetch_html(url: str, timeout: float = DEFAULT_TIMEOUT, session=None) -> str:
    """
    GET ``url`` with browser-like headers and return the body.

    Raises TransportError on connection problems and non-2xx responses.
    """
    getter = session.get if session is not None else requests.get
    try:
        resp = getter(url, headers=HEADERS, timeout=timeout)
    except requests.RequestException as e:
        logger.debug("Request to %s failed: %s", url, e)
        raise TransportError(url, f"request failed: {e}") from e

    if not 200 <= resp.status_code < 300:
        raise TransportError(url, f"HTTP {resp.status_code}", status=resp.status_code)
    return resp.text
