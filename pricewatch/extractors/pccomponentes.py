"""PcComponentes product pages."""

from bs4 import BeautifulSoup

from pricewatch.extractors.base import Extractor


class PcComponentesExtractor(Extractor):
    name = "pccomponentes"
    title_selectors = (
        "#pdp-title",
        ".ficha-producto__header-title",
        ".ficha-producto__name",
        'h1[itemprop="name"]',
        "h1",
    )
    price_selectors = (
        '[data-e2e="product-price-current"]',
        ".pdp-price__current",
        ".product-hero__price-current",
        ".price-box__current",
        ".price-current",
        ".product-price__current",
        '[itemprop="price"]',
        'meta[property="product:price:amount"]',
    )
    image_selectors = (
        ".ficha-producto__gallery img",
        ".product-gallery__image img",
        'img[data-testid="product-image"]',
        'meta[property="og:image"]',
    )
    availability_selectors = (
        ".ficha-producto__availability",
        ".product-stock",
        '[data-testid="availability"]',
        ".availability",
    )

    def extract_price_text(self, soup: BeautifulSoup, selector_hint: str | None = None) -> str | None:
        # Split integer/decimal markup on the current product page
        container = soup.select_one("#pdp-price-current-container")
        if container is not None:
            integer = container.select_one("#pdp-price-current-integer")
            decimals = container.select_one("#pdp-price-current-decimals")
            if integer is not None:
                text = integer.get_text(strip=True).rstrip(",.")
                if decimals is not None:
                    text = f"{text},{decimals.get_text(strip=True).lstrip(',.')}"
                return f"{text} €"
        return super().extract_price_text(soup, selector_hint)
