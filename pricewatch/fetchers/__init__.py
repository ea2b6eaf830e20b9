"""Page fetchers: plain HTTP first, optional headless browser fallback."""

import logging
import os

from pricewatch.errors import TransportError
from pricewatch.fetchers.http import fetch_html

logger = logging.getLogger(__name__)

# Statuses that usually mean "blocked as a bot" rather than "page is gone"
BROWSER_RETRY_STATUSES = frozenset({403, 429, 503})


def _use_browser_fallback() -> bool:
    """Check if the browser fallback is enabled via USE_BROWSER_FALLBACK."""
    val = os.environ.get("USE_BROWSER_FALLBACK", "false").lower()
    return val in ("true", "1", "yes")


def fetch_page(url: str) -> str:
    """
    Fetch ``url`` and return its HTML.

    Order: 1) requests, 2) Playwright when USE_BROWSER_FALLBACK is set and
    the site answered with a bot-blocking status.
    """
    try:
        return fetch_html(url)
    except TransportError as e:
        if e.status not in BROWSER_RETRY_STATUSES or not _use_browser_fallback():
            raise
        logger.info("%s answered %s, retrying with browser", url, e.status)

    from pricewatch.fetchers.browser import fetch_html_with_browser

    return fetch_html_with_browser(url)


__all__ = ["fetch_page", "fetch_html"]
