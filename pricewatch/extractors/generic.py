"""
Auto-detecting extractor for whitelisted stores.

Tries, in order of reliability, until one attempt finds a price:

    1. JSON-LD Product offers
    2. Open Graph / product meta tags
    3. Selectors of common shop platforms (Shopify, PrestaShop, Magento...)
    4. Scored scan of generic price-looking elements
"""

import logging
import re

from bs4 import BeautifulSoup

from pricewatch.extractors import jsonld
from pricewatch.extractors.base import Extractor, failure, select_text, selector_error
from pricewatch.extractors.prices import detect_currency, is_out_of_stock, looks_like_price, parse_price
from pricewatch.fetchers import fetch_page
from pricewatch.models import ExtractionResult

logger = logging.getLogger(__name__)

PLATFORM_PRICE_SELECTORS = (
    # Shopify
    (".product__price", ".price--main", ".product-price", "[data-product-price]"),
    # PrestaShop
    (".current-price", '[itemprop="price"]'),
    # Magento
    ('[data-price-type="finalPrice"]', ".product-info-price .price"),
    # WooCommerce
    (".summary .woocommerce-Price-amount", ".woocommerce-Price-amount"),
    # BigCommerce / Wix
    (".price-section .price", ".variant-price", ".current-variant-price"),
)

GENERIC_PRICE_SELECTORS = (
    ".price",
    ".precio",
    "#price",
    ".product-price",
    '[class*="price"]',
    '[class*="precio"]',
    '[id*="price"]',
    "[data-price]",
    ".sale-price",
    ".regular-price",
    ".main-price",
)

PRICE_ATTRS = ("content", "data-price", "data-price-value", "data-price-final", "data-amount", "data-value")

_PRICE_CLASS = re.compile(r"price|precio|cost|amount", re.I)
_STRIKE_CLASS = re.compile(r"old|was|before|antes|regular|strike|original", re.I)


def _meta(soup: BeautifulSoup, *names: str) -> str | None:
    for name in names:
        el = soup.find("meta", attrs={"property": name}) or soup.find("meta", attrs={"name": name})
        if el is not None and el.get("content"):
            return el["content"].strip()
    return None


def _title(soup: BeautifulSoup) -> str | None:
    return _meta(soup, "og:title", "twitter:title") or select_text(soup, ("h1", "title"))


def _element_price(el) -> tuple[float, str] | None:
    for attr in PRICE_ATTRS:
        price = parse_price(el.get(attr))
        if price:
            return price, el.get(attr)
    text = el.get_text(" ", strip=True)
    if text and len(text) < 40 and looks_like_price(text):
        price = parse_price(text)
        if price:
            return price, text
    return None


def _score(el) -> int:
    """Prefer current prices over crossed-out ones."""
    classes = " ".join(el.get("class", [])) + " " + (el.get("id") or "")
    score = 0
    if _PRICE_CLASS.search(classes):
        score += 3
    if el.get("itemprop") == "price":
        score += 5
    if el.has_attr("data-price") or el.has_attr("data-price-value") or el.has_attr("data-price-final"):
        score += 2
    if _STRIKE_CLASS.search(classes) or el.find_parent(["del", "s", "strike"]) is not None:
        score -= 5
    return score


class GenericExtractor(Extractor):
    """Cascade of independent attempts; the first one to find a price wins."""

    name = "generic"

    def __init__(self, site_name: str | None = None, fetcher=fetch_page):
        super().__init__(fetcher)
        self.site_name = site_name
        self.attempts = (
            ("json-ld", self._from_json_ld),
            ("meta-tags", self._from_meta_tags),
            ("platform-selectors", self._from_platform_selectors),
            ("generic-patterns", self._from_generic_patterns),
        )

    def parse(self, soup: BeautifulSoup, selector_hint: str | None = None) -> ExtractionResult:
        if selector_hint:
            return self._from_selector(soup, selector_hint)

        for method, attempt in self.attempts:
            result = attempt(soup)
            if result is not None:
                result.method = method
                logger.debug("%s: price found via %s", self.site_name or self.name, method)
                return result
            logger.debug("%s: %s found nothing", self.site_name or self.name, method)

        logger.info("All auto-extraction methods failed for %s", self.site_name or "unknown store")
        return failure("Automatic extraction failed, manual price selection required", _title(soup) or "Product")

    def _result(self, soup: BeautifulSoup, price: float, price_text: str | None, currency: str | None = None) -> ExtractionResult:
        return ExtractionResult(
            title=_title(soup) or self.site_name or "Product",
            price=price,
            currency=currency or detect_currency(price_text),
            available=not is_out_of_stock(select_text(soup, (".availability", ".stock", '[class*="availability"]'))),
            image_url=_meta(soup, "og:image", "twitter:image"),
        )

    def _from_selector(self, soup: BeautifulSoup, selector: str) -> ExtractionResult:
        error = selector_error(selector)
        if error:
            logger.warning("%s: %s", self.site_name or self.name, error)
            return failure(error, _title(soup) or "Product")
        text = select_text(soup, (selector,))
        price = parse_price(text)
        if price is None:
            return failure("Price element not found or unreadable, please re-select the price")
        result = self._result(soup, price, text)
        result.method = "custom-selector"
        return result

    def _from_json_ld(self, soup: BeautifulSoup) -> ExtractionResult | None:
        product = jsonld.find_product(soup)
        if product is None:
            return None
        return ExtractionResult(
            title=product.title or _title(soup) or "Product",
            price=product.price,
            currency=product.currency or "EUR",
            available=product.available,
            image_url=product.image_url or _meta(soup, "og:image"),
        )

    def _from_meta_tags(self, soup: BeautifulSoup) -> ExtractionResult | None:
        price_text = _meta(soup, "og:price:amount", "product:price:amount", "twitter:data1")
        price = parse_price(price_text)
        if price is None:
            return None
        currency = _meta(soup, "og:price:currency", "product:price:currency")
        return self._result(soup, price, price_text, currency)

    def _from_platform_selectors(self, soup: BeautifulSoup) -> ExtractionResult | None:
        for selectors in PLATFORM_PRICE_SELECTORS:
            for selector in selectors:
                for el in soup.select(selector):
                    found = _element_price(el)
                    if found:
                        return self._result(soup, *found)
        return None

    def _from_generic_patterns(self, soup: BeautifulSoup) -> ExtractionResult | None:
        candidates = []
        seen = set()
        for selector in GENERIC_PRICE_SELECTORS:
            for el in soup.select(selector):
                if id(el) in seen:
                    continue
                seen.add(id(el))
                found = _element_price(el)
                if found:
                    candidates.append((_score(el), len(candidates), found))
        if not candidates:
            return None
        # Highest score wins; document order breaks ties
        candidates.sort(key=lambda c: (-c[0], c[1]))
        return self._result(soup, *candidates[0][2])
