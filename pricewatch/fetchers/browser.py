"""Headless browser fetcher for pages that refuse plain HTTP clients."""

import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from pricewatch.errors import TransportError
from pricewatch.fetchers.http import HEADERS

logger = logging.getLogger(__name__)

NAVIGATION_TIMEOUT_MS = 60000
SETTLE_MS = 2000


def fetch_html_with_browser(url: str) -> str:
    """
    Render ``url`` in headless Firefox and return the resulting HTML.

    Firefox is less likely than Chromium to be blocked by bot protection.
    """
    try:
        with sync_playwright() as p:
            browser = p.firefox.launch(headless=True)
            try:
                context = browser.new_context(
                    user_agent=HEADERS["User-Agent"],
                    locale="es-ES",
                )
                page = context.new_page()
                response = page.goto(url, wait_until="domcontentloaded", timeout=NAVIGATION_TIMEOUT_MS)
                if response is not None and not response.ok:
                    raise TransportError(url, f"HTTP {response.status} (browser)", status=response.status)
                page.wait_for_timeout(SETTLE_MS)
                return page.content()
            finally:
                browser.close()
    except PlaywrightError as e:
        logger.warning("Browser fetch of %s failed: %s", url, e)
        raise TransportError(url, f"browser fetch failed: {e}") from e
