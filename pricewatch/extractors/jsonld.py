"""Read Product offers out of JSON-LD blocks."""

import json
import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup

from pricewatch.extractors.prices import parse_price

logger = logging.getLogger(__name__)

LD_JSON_TYPES = ["application/ld+json", "application/json+ld"]


@dataclass
class JsonLdProduct:
    title: str | None
    price: float
    currency: str | None
    image_url: str | None
    available: bool


def _flatten(payload) -> list[dict]:
    """All dict nodes of a JSON-LD payload, following @graph and itemListElement."""
    nodes = []
    stack = [payload]
    while stack:
        node = stack.pop(0)
        if isinstance(node, list):
            stack.extend(node)
        elif isinstance(node, dict):
            nodes.append(node)
            for key in ("@graph", "itemListElement"):
                if key in node:
                    stack.append(node[key])
    return nodes


def _is_product(node: dict) -> bool:
    kind = node.get("@type")
    kinds = kind if isinstance(kind, list) else [kind]
    return any(isinstance(k, str) and "product" in k.lower() for k in kinds)


def _as_list(value) -> list[dict]:
    if isinstance(value, list):
        return [v for v in value if isinstance(v, dict)]
    if isinstance(value, dict):
        return [value]
    return []


def _offer_price(offer: dict) -> float | None:
    for key in ("price", "lowPrice", "currentPrice", "highPrice"):
        price = parse_price(offer.get(key))
        if price:
            return price
    for spec in _as_list(offer.get("priceSpecification")):
        price = parse_price(spec.get("price"))
        if price:
            return price
    return None


def _offer_currency(offer: dict) -> str | None:
    currency = offer.get("priceCurrency")
    if isinstance(currency, str) and currency.strip():
        return currency.strip().upper()
    for spec in _as_list(offer.get("priceSpecification")):
        currency = spec.get("priceCurrency")
        if isinstance(currency, str) and currency.strip():
            return currency.strip().upper()
    return None


def _image(node: dict) -> str | None:
    image = node.get("image")
    if isinstance(image, str):
        return image
    if isinstance(image, list):
        return next((i for i in image if isinstance(i, str)), None)
    if isinstance(image, dict) and isinstance(image.get("url"), str):
        return image["url"]
    return None


def _title(node: dict) -> str | None:
    for key in ("name", "title", "headline"):
        value = node.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def find_product(soup: BeautifulSoup) -> JsonLdProduct | None:
    """First Product node with a positive offer price, or None."""
    for script in soup.find_all("script", type=LD_JSON_TYPES):
        try:
            payload = json.loads(script.string or "")
        except (json.JSONDecodeError, TypeError):
            logger.debug("Skipping invalid JSON-LD block")
            continue
        for node in _flatten(payload):
            if not _is_product(node):
                continue
            for offer in _as_list(node.get("offers")) or [node]:
                price = _offer_price(offer)
                if price is None:
                    continue
                availability = str(offer.get("availability", ""))
                return JsonLdProduct(
                    title=_title(node),
                    price=price,
                    currency=_offer_currency(offer),
                    image_url=_image(node),
                    available="OutOfStock" not in availability and "SoldOut" not in availability,
                )
    return None
