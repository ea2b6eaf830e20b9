"""
Score how much a page looks like an online store.

Used for domains that are neither served by a specific extractor nor on the
whitelist. Signals and weights:

    structured Product data (JSON-LD)      +50
    product meta tags (og:type=product...) +30
    e-commerce DOM elements                +5 each, max +25
    product-like URL path                  +15
    at least two shopping keywords         +10

A page scoring ECOMMERCE_THRESHOLD or more is treated as a store.
"""

import json
import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup

from pricewatch.resolver.product_page import PRODUCT_MARKERS
from pricewatch.resolver.sites import ECOMMERCE_DOMAINS, NON_ECOMMERCE_DOMAINS
from pricewatch.urls import extract_domain, in_domain_list

logger = logging.getLogger(__name__)

ECOMMERCE_THRESHOLD = 50

STRUCTURED_DATA_POINTS = 50
META_TAG_POINTS = 30
DOM_POINTS_PER_SIGNAL = 5
DOM_POINTS_CAP = 25
URL_POINTS = 15
KEYWORD_POINTS = 10

PRODUCT_TYPES = frozenset({"Product", "Offer", "AggregateOffer", "ProductCollection"})

PRODUCT_META_SELECTORS = (
    'meta[property="og:type"][content="product"]',
    'meta[property="product:price:amount"]',
    'meta[property="product:price:currency"]',
    'meta[name="twitter:data1"]',
)

# Each selector family counts once, however many elements match
DOM_SIGNAL_SELECTORS = (
    ".product",
    ".product-page",
    "#product",
    '[class*="product-"]',
    ".price",
    ".product-price",
    "#price",
    '[class*="price"]',
    '[itemprop="price"]',
    ".add-to-cart",
    ".buy-now",
    ".checkout",
    ".cart",
    '[class*="add-to-cart"]',
    '[class*="buy-now"]',
    ".quantity",
    'input[name="quantity"]',
)

SHOPPING_KEYWORDS = (
    "add to cart",
    "añadir al carrito",
    "buy now",
    "comprar ahora",
    "in stock",
    "en stock",
    "out of stock",
    "agotado",
    "free shipping",
    "envío gratis",
    "delivery",
    "entrega",
)


@dataclass
class EcommerceVerdict:
    """Outcome of scoring one page."""

    is_ecommerce: bool
    score: int | None = None
    signals: list[str] = field(default_factory=list)
    reason: str = ""


def _is_product_type(value) -> bool:
    if isinstance(value, str):
        return value in PRODUCT_TYPES
    if isinstance(value, list):
        return any(isinstance(v, str) and v in PRODUCT_TYPES for v in value)
    return False


def has_product_structured_data(soup: BeautifulSoup) -> bool:
    for script in soup.find_all("script", type="application/ld+json"):
        try:
            data = json.loads(script.string or "")
        except (json.JSONDecodeError, TypeError):
            continue
        nodes = data if isinstance(data, list) else [data]
        for node in nodes:
            if not isinstance(node, dict):
                continue
            if _is_product_type(node.get("@type")):
                return True
            graph = node.get("@graph")
            if isinstance(graph, list) and any(
                isinstance(g, dict) and _is_product_type(g.get("@type")) for g in graph
            ):
                return True
    return False


def has_product_meta_tags(soup: BeautifulSoup) -> bool:
    return any(soup.select_one(selector) is not None for selector in PRODUCT_META_SELECTORS)


def count_dom_signals(soup: BeautifulSoup) -> int:
    return sum(1 for selector in DOM_SIGNAL_SELECTORS if soup.select_one(selector) is not None)


def has_product_url(url: str) -> bool:
    lower = url.lower()
    return any(marker in lower for marker in PRODUCT_MARKERS)


def has_shopping_keywords(soup: BeautifulSoup) -> bool:
    body = soup.body or soup
    text = body.get_text(" ").lower()
    return sum(1 for keyword in SHOPPING_KEYWORDS if keyword in text) >= 2


def score_document(soup: BeautifulSoup, url: str) -> tuple[int, list[str]]:
    """Return (score, names of the signals that fired)."""
    score = 0
    signals = []

    if has_product_structured_data(soup):
        score += STRUCTURED_DATA_POINTS
        signals.append("product data")
    if has_product_meta_tags(soup):
        score += META_TAG_POINTS
        signals.append("product meta tags")
    dom_count = count_dom_signals(soup)
    if dom_count:
        score += min(dom_count * DOM_POINTS_PER_SIGNAL, DOM_POINTS_CAP)
        signals.append(f"{dom_count} e-commerce elements")
    if has_product_url(url):
        score += URL_POINTS
        signals.append("product URL pattern")
    if has_shopping_keywords(soup):
        score += KEYWORD_POINTS
        signals.append("e-commerce keywords")

    return score, signals


def detect_ecommerce(url: str, document: str | BeautifulSoup | None) -> EcommerceVerdict:
    """
    Judge whether ``url`` (and its HTML ``document``) belongs to a store.

    Blacklisted domains are rejected and allow-listed ones accepted before
    any scoring. Without a document no verdict can be reached and the page
    is not considered a store.
    """
    host = extract_domain(url)
    if host is None:
        return EcommerceVerdict(False, reason="Unable to analyze this page")
    if in_domain_list(host, NON_ECOMMERCE_DOMAINS):
        return EcommerceVerdict(False, reason="Known non-store site")
    if in_domain_list(host, ECOMMERCE_DOMAINS):
        return EcommerceVerdict(True, reason="Known online store")
    if document is None:
        return EcommerceVerdict(False, reason="No document to analyze")

    soup = document if isinstance(document, BeautifulSoup) else BeautifulSoup(document, "html.parser")
    score, signals = score_document(soup, url)
    is_ecommerce = score >= ECOMMERCE_THRESHOLD
    logger.debug("E-commerce score for %s: %d (%s)", host, score, ", ".join(signals) or "none")
    reason = f"Detected: {', '.join(signals)}" if signals else "No e-commerce signals detected"
    return EcommerceVerdict(is_ecommerce, score=score, signals=signals, reason=reason)
