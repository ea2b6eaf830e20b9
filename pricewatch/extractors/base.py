"""Common extraction flow shared by every site extractor."""

import logging
from typing import Callable

from bs4 import BeautifulSoup
import soupsieve

from pricewatch.extractors import jsonld
from pricewatch.extractors.prices import detect_currency, is_out_of_stock, parse_price
from pricewatch.fetchers import fetch_page
from pricewatch.models import ExtractionResult

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], str]


def select_text(soup: BeautifulSoup, selectors) -> str | None:
    """Stripped text of the first selector that matches a non-empty element."""
    for selector in selectors:
        el = soup.select_one(selector)
        if el is None:
            continue
        if el.name in ("meta", "input"):
            text = el.get("content") or el.get("value") or ""
        else:
            text = el.get_text(" ", strip=True)
        if text:
            return text
    return None


def select_attr(soup: BeautifulSoup, selectors, attrs=("src", "data-src", "content", "href")) -> str | None:
    for selector in selectors:
        el = soup.select_one(selector)
        if el is None:
            continue
        for attr in attrs:
            value = el.get(attr)
            if value and "placeholder" not in value:
                return value
    return None


def selector_error(selector: str) -> str | None:
    """Error message when ``selector`` is not valid CSS, else None."""
    try:
        soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        return f"Invalid price selector {selector!r}: {e}"
    return None


def failure(error: str, title: str = "Product", currency: str = "EUR") -> ExtractionResult:
    """Standard result for a page that yielded no usable price."""
    return ExtractionResult(title=title, price=0.0, currency=currency, available=False, error=error)


class Extractor:
    """
    Template for site extractors.

    Subclasses list CSS selectors for title, price, image and availability;
    when no price selector matches, the JSON-LD Product offer is used.
    """

    name = "base"
    title_selectors: tuple[str, ...] = ("h1",)
    price_selectors: tuple[str, ...] = ()
    image_selectors: tuple[str, ...] = ()
    availability_selectors: tuple[str, ...] = ()
    default_currency = "EUR"

    def __init__(self, fetcher: Fetcher = fetch_page):
        self.fetcher = fetcher

    def extract(self, url: str, html: str | None = None, selector_hint: str | None = None) -> ExtractionResult:
        """
        Extract product data for ``url``.

        The page is fetched when ``html`` is not given; transport failures
        propagate as TransportError.
        """
        if html is None:
            html = self.fetcher(url)
        soup = BeautifulSoup(html, "html.parser")
        result = self.parse(soup, selector_hint)
        logger.debug(
            "%s extraction for %s: price=%s available=%s error=%s",
            self.name, url, result.price, result.available, result.error,
        )
        return result

    def parse(self, soup: BeautifulSoup, selector_hint: str | None = None) -> ExtractionResult:
        title = self.extract_title(soup)
        error = selector_error(selector_hint) if selector_hint else None
        if error:
            logger.warning("%s: %s", self.name, error)
            return failure(error, title or "Product", self.default_currency)
        price_text = self.extract_price_text(soup, selector_hint)
        price = parse_price(price_text)

        if price is None:
            product = jsonld.find_product(soup)
            if product is None:
                return failure("Price not found", title or "Product", self.default_currency)
            return ExtractionResult(
                title=title or product.title or "Product",
                price=product.price,
                currency=product.currency or self.default_currency,
                available=product.available,
                image_url=self.extract_image(soup) or product.image_url,
                method="json-ld",
            )

        if not title:
            return failure("Title not found", currency=self.default_currency)

        return ExtractionResult(
            title=title,
            price=price,
            currency=detect_currency(price_text, self.default_currency),
            available=self.check_availability(soup),
            image_url=self.extract_image(soup),
            method="selectors",
        )

    def extract_title(self, soup: BeautifulSoup) -> str | None:
        return select_text(soup, self.title_selectors)

    def extract_price_text(self, soup: BeautifulSoup, selector_hint: str | None = None) -> str | None:
        selectors = ((selector_hint,) if selector_hint else ()) + self.price_selectors
        for selector in selectors:
            text = select_text(soup, (selector,))
            if text and parse_price(text):
                return text
        return None

    def extract_image(self, soup: BeautifulSoup) -> str | None:
        return select_attr(soup, self.image_selectors)

    def check_availability(self, soup: BeautifulSoup) -> bool:
        """Assume available unless an availability element says otherwise."""
        text = select_text(soup, self.availability_selectors)
        return not is_out_of_stock(text)
