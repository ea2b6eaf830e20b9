"""eBay item pages."""

from pricewatch.extractors.base import Extractor


class EbayExtractor(Extractor):
    name = "ebay"
    default_currency = "USD"
    title_selectors = (
        "h1.x-item-title__mainTitle",
        ".x-item-title .ux-textspans",
        "h1.it-ttl",
        'h1[itemprop="name"]',
    )
    price_selectors = (
        ".x-price-primary .ux-textspans",
        '[data-testid="x-price-primary"] span',
        '[data-testid="x-price-primary"]',
        ".vi-VR-cvipPrice",
        '[itemprop="price"]',
        ".display-price",
    )
    image_selectors = (
        ".ux-image-carousel-item img",
        '[data-testid="ux-image-carousel-item"] img',
        "#icImg",
        ".vi_content img",
    )
    availability_selectors = (
        ".d-quantity__availability",
        ".vi-acc-del-range",
        '[data-testid="ux-layout-section-module-evo"]',
    )
