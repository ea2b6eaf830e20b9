"""Selector-driven extractor for stores without automatic support."""

import logging

from bs4 import BeautifulSoup

from pricewatch.extractors.base import Extractor, failure, select_text, selector_error
from pricewatch.extractors.prices import detect_currency, parse_price
from pricewatch.models import ExtractionResult

logger = logging.getLogger(__name__)


class ManualExtractor(Extractor):
    """Reads the price from the CSS selector the user picked when tracking."""

    name = "manual"
    image_selectors = ('meta[property="og:image"]', 'meta[name="twitter:image"]', "img")

    def parse(self, soup: BeautifulSoup, selector_hint: str | None = None) -> ExtractionResult:
        if not selector_hint:
            logger.warning("Manual extraction requested without a price selector")
            return failure("Manual selection required: no price selector stored", "")

        error = selector_error(selector_hint)
        if error:
            return failure(error, "")
        element = soup.select_one(selector_hint)

        if element is None:
            logger.warning("Custom selector did not match any element: %s", selector_hint)
            return failure(
                "Price element not found. The page layout may have changed, re-select the price.",
                "",
            )

        text = element.get("content") or element.get_text(" ", strip=True)
        price = parse_price(text)
        if price is None:
            logger.warning("Could not parse price from %r (selector %s)", text[:100], selector_hint)
            return failure("Could not parse price from the selected element", "")

        title = (
            select_text(soup, ('meta[property="og:title"]', "h1", "title"))
            or "Product"
        )
        return ExtractionResult(
            title=title,
            price=price,
            currency=detect_currency(text, self.default_currency),
            available=True,
            image_url=self.extract_image(soup),
            method="custom-selector",
        )
