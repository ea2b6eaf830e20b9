"""Decide whether a URL points at an individual product page."""

import logging
import re
from urllib.parse import urlsplit

from pricewatch.resolver.sites import get_specific_site

logger = logging.getLogger(__name__)

# Path markers that identify a product page on most stores
PRODUCT_MARKERS = (
    "/product/",
    "/products/",
    "/p/",
    "/item/",
    "/items/",
    "/dp/",
    "/gp/product/",
    "/itm/",
    "/articulo/",
    "/producto/",
    "/listing/",
    "/product-",
    "-product/",
)

# Listing, account and utility pages
NON_PRODUCT_MARKERS = (
    # Amazon
    "/gp/your-account",
    "/your-account",
    "/cpe/yourpayments",
    "/gp/cart",
    "/gp/bestsellers",
    "/gp/new-releases",
    "/gp/goldbox",
    "/gp/browse",
    "/ap/signin",
    "/gp/css/homepage.html",
    "/s/",
    "/b/",
    # eBay
    "/mye/",
    "/sch/",
    "/ctg/",
    "/d/",
    # AliExpress
    "/user/",
    "/order",
    "/wholesale",
    # General
    "/cart",
    "/checkout",
    "/wishlist",
    "/history",
    "/account",
    "/profile",
    "/login",
    "/register",
    "/contact",
    "/about",
    "/help",
    "/faq",
    "/blog",
    "/news",
    "/reviews",
    "/compare",
    "/search",
    "/category",
    "/categories",
    "/collection",
    "/brand",
    "/sale",
    "/deals",
    "/clearance",
    "/outlet",
    "/store",
    "/shop",
)

PRODUCT_ID_PATTERNS = (
    re.compile(r"\d{6,}"),
    re.compile(r"[a-z0-9]{8,}"),
    re.compile(r"-[a-z0-9]{6,}$"),
)


def _path(url: str) -> str | None:
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return parts.path.lower() or "/"


def _site_markers(site: str | None) -> tuple[str, ...]:
    specific = get_specific_site(site) if site else None
    return specific.product_markers if specific else ()


def strong_marker(path: str, site: str | None = None) -> str | None:
    """
    Return the first product marker found in ``path``.

    Sites with their own markers are matched against those alone; the
    generic markers apply to every other site.
    """
    markers = _site_markers(site) or PRODUCT_MARKERS
    return next((m for m in markers if m in path), None)


def non_product_marker(path: str) -> str | None:
    return next((m for m in NON_PRODUCT_MARKERS if m in path), None)


def has_product_like_shape(path: str) -> bool:
    """At least two segments and a last segment that looks like a product id."""
    segments = [s for s in path.split("/") if s]
    if len(segments) < 2:
        return False
    last = segments[-1]
    return any(pattern.search(last) for pattern in PRODUCT_ID_PATTERNS)


def is_product_page(url: str, site: str | None = None) -> bool:
    """
    Product-page verdict for ``url``.

    On a site with its own product markers the verdict is whether one of
    them is present. Elsewhere strong product markers win over non-product
    markers; without either, fall back to the path shape. Unparseable URLs
    are never product pages.
    """
    path = _path(url)
    if path is None:
        return False
    if strong_marker(path, site):
        return True
    if _site_markers(site):
        return False
    if non_product_marker(path):
        return False
    return has_product_like_shape(path)


def explain(url: str, site: str | None = None) -> str:
    path = _path(url)
    if path is None:
        return "Unable to analyze this URL"
    marker = strong_marker(path, site)
    if marker:
        return f'Product page: URL contains "{marker}"'
    marker = non_product_marker(path)
    if marker:
        return f'Not a product page: URL contains "{marker}"'
    if _site_markers(site):
        return f"Not a product page: URL has no {site} product marker"
    if has_product_like_shape(path):
        return "Product page: URL has a product-like structure"
    return "Not a product page: URL doesn't match product patterns"
