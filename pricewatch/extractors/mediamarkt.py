"""MediaMarkt product pages (mediamarkt.es, mediamarkt.de...)."""

from bs4 import BeautifulSoup

from pricewatch.extractors import jsonld
from pricewatch.extractors.base import Extractor
from pricewatch.models import ExtractionResult


class MediaMarktExtractor(Extractor):
    """MediaMarkt renders prices client side; JSON-LD is tried before selectors."""

    name = "mediamarkt"
    title_selectors = (
        'h1[data-test="product-title"]',
        ".m-productDetails__title",
        ".product-title",
        "h1",
    )
    price_selectors = (
        '[data-test="product-price"]',
        ".price-tag .price",
        ".m-priceBox__price",
        ".pdp-price",
        ".price__value",
    )
    image_selectors = (
        '[data-test="gallery-image"] img',
        ".m-productGallery__image img",
        ".product-gallery img",
    )
    availability_selectors = (
        '[data-test="availability-text"]',
        ".m-availability",
        ".product-availability",
    )

    def parse(self, soup: BeautifulSoup, selector_hint: str | None = None) -> ExtractionResult:
        product = jsonld.find_product(soup)
        if product is not None and not selector_hint:
            return ExtractionResult(
                title=product.title or self.extract_title(soup) or "Producto",
                price=product.price,
                currency=product.currency or self.default_currency,
                available=product.available,
                image_url=product.image_url or self.extract_image(soup),
                method="json-ld",
            )
        return super().parse(soup, selector_hint)
