"""AliExpress item pages."""

from pricewatch.extractors.base import Extractor


class AliExpressExtractor(Extractor):
    name = "aliexpress"
    default_currency = "USD"
    title_selectors = (
        'h1[data-pl="product-title"]',
        "h1.product-title",
        ".product-title-text",
        ".pdp-info-title",
    )
    price_selectors = (
        '[data-pl="product-price"]',
        ".product-price-current",
        ".product-price-value",
        ".uniform-banner-box-price",
        ".pdp-price",
        '[data-testid="price-value"]',
        ".price-sale",
        ".current-price",
    )
    image_selectors = (
        ".magnifier-image",
        ".pdp-main-image",
        '[data-pl="product-image"]',
        ".images-view-item img",
    )
