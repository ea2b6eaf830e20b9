import pytest
from bs4 import BeautifulSoup

from pricewatch.errors import TransportError
from pricewatch.extractors import (
    AmazonExtractor,
    GenericExtractor,
    ManualExtractor,
    MediaMarktExtractor,
    PcComponentesExtractor,
)
from pricewatch.extractors import jsonld
from pricewatch.extractors.prices import detect_currency, is_out_of_stock, parse_price

AMAZON_PAGE = """
<html><body>
<span id="productTitle"> Echo Dot (5th gen) </span>
<div class="a-price"><span class="a-offscreen">54,99 €</span></div>
<div id="availability"><span>{availability}</span></div>
<img id="landingImage" src="https://m.media-amazon.com/images/I/echo.jpg">
</body></html>
"""


def soup(html):
    return BeautifulSoup(html, "html.parser")


class TestParsePrice:
    @pytest.mark.parametrize("text, expected", [
        ("$1,299.99", 1299.99),
        ("1.299,99 €", 1299.99),
        ("55,67", 55.67),
        ("EUR 1 299,00", 1299.0),
        ("1.299", 1299.0),
        ("£9.5", 9.5),
        (19.9, 19.9),
    ])
    def test_formats(self, text, expected):
        assert parse_price(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", [None, "", "Free", "0,00", 0])
    def test_no_price(self, text):
        assert parse_price(text) is None

    def test_currency(self):
        assert detect_currency("1.299,99 €") == "EUR"
        assert detect_currency("$5") == "USD"
        assert detect_currency("£5") == "GBP"
        assert detect_currency("5", default="USD") == "USD"

    def test_out_of_stock(self):
        assert is_out_of_stock("Currently unavailable.")
        assert is_out_of_stock("AGOTADO")
        assert not is_out_of_stock("En stock")
        assert not is_out_of_stock(None)


class TestJsonLd:
    def test_offer_list_inside_graph(self):
        html = """<script type="application/ld+json">
        {"@graph": [{"@type": "WebPage"},
                    {"@type": ["Product"], "name": "Mug", "image": ["https://img/mug.jpg"],
                     "offers": [{"@type": "AggregateOffer", "lowPrice": "8.50", "priceCurrency": "gbp"}]}]}
        </script>"""
        product = jsonld.find_product(soup(html))
        assert product.title == "Mug"
        assert product.price == 8.5
        assert product.currency == "GBP"
        assert product.image_url == "https://img/mug.jpg"
        assert product.available

    def test_sold_out(self):
        html = """<script type="application/ld+json">
        {"@type": "Product", "name": "Mug", "offers": {"price": 8, "availability": "https://schema.org/SoldOut"}}
        </script>"""
        assert jsonld.find_product(soup(html)).available is False

    def test_invalid_json_is_skipped(self):
        html = '<script type="application/ld+json">{not json</script>'
        assert jsonld.find_product(soup(html)) is None


class TestSiteExtractors:
    def test_amazon_selectors(self):
        result = AmazonExtractor().extract("https://www.amazon.es/dp/X", AMAZON_PAGE.format(availability="En stock"))
        assert result.title == "Echo Dot (5th gen)"
        assert result.price == 54.99
        assert result.currency == "EUR"
        assert result.available is True
        assert result.image_url == "https://m.media-amazon.com/images/I/echo.jpg"
        assert result.method == "selectors"
        assert result.error is None

    def test_amazon_out_of_stock(self):
        page = AMAZON_PAGE.format(availability="Temporarily unavailable.")
        assert AmazonExtractor().extract("https://www.amazon.es/dp/X", page).available is False

    def test_json_ld_fallback(self):
        page = """<html><body><span id="productTitle">Kindle</span>
        <script type="application/ld+json">{"@type": "Product", "offers": {"price": "19.99", "priceCurrency": "USD"}}</script>
        </body></html>"""
        result = AmazonExtractor().extract("https://www.amazon.com/dp/X", page)
        assert result.price == 19.99
        assert result.currency == "USD"
        assert result.title == "Kindle"
        assert result.method == "json-ld"

    def test_no_price(self):
        result = AmazonExtractor().extract("https://www.amazon.es/dp/X", "<span id='productTitle'>Kindle</span>")
        assert result.error == "Price not found"
        assert result.available is False
        assert result.price == 0.0

    def test_pccomponentes_split_price(self):
        page = """<h1 id="pdp-title">Portátil X</h1>
        <div id="pdp-price-current-container">
          <span id="pdp-price-current-integer">1.299,</span><span id="pdp-price-current-decimals">99</span>
        </div>"""
        result = PcComponentesExtractor().extract("https://www.pccomponentes.com/portatil-x", page)
        assert result.price == 1299.99
        assert result.title == "Portátil X"

    def test_mediamarkt_prefers_json_ld(self):
        page = """<h1>TV</h1><span data-test="product-price">999,00 €</span>
        <script type="application/ld+json">{"@type": "Product", "name": "TV 55", "offers": {"price": 899, "priceCurrency": "EUR"}}</script>"""
        result = MediaMarktExtractor().extract("https://www.mediamarkt.es/es/product/_tv-1.html", page)
        assert result.price == 899
        assert result.title == "TV 55"
        assert result.method == "json-ld"

    @pytest.mark.parametrize("extractor", [
        AmazonExtractor(),
        PcComponentesExtractor(),
        MediaMarktExtractor(),
    ], ids=lambda e: e.name)
    def test_invalid_selector_hint(self, extractor):
        page = AMAZON_PAGE.format(availability="En stock")
        result = extractor.extract("https://www.amazon.es/dp/X", page, selector_hint="div[[")
        assert result.error.startswith("Invalid price selector 'div[['")
        assert result.price == 0.0
        assert result.available is False

    def test_fetches_when_no_html_given(self):
        fetched = []

        def fetcher(url):
            fetched.append(url)
            return AMAZON_PAGE.format(availability="")

        result = AmazonExtractor(fetcher).extract("https://www.amazon.es/dp/X")
        assert fetched == ["https://www.amazon.es/dp/X"]
        assert result.price == 54.99

    def test_transport_errors_propagate(self):
        def fetcher(url):
            raise TransportError(url, "HTTP 503", status=503)

        with pytest.raises(TransportError) as exc:
            AmazonExtractor(fetcher).extract("https://www.amazon.es/dp/X")
        assert exc.value.status == 503


class TestGenericCascade:
    def test_json_ld_comes_first(self):
        page = """<head><meta property="product:price:amount" content="12.00">
        <script type="application/ld+json">{"@type": "Product", "name": "Mug", "offers": {"price": "10.00", "priceCurrency": "EUR"}}</script></head>"""
        result = GenericExtractor("Shop").extract("https://shop.example/p/mug", page)
        assert result.price == 10.0
        assert result.method == "json-ld"

    def test_meta_tags(self):
        page = """<head><meta property="og:title" content="Mug">
        <meta property="product:price:amount" content="24.50">
        <meta property="product:price:currency" content="GBP"></head>"""
        result = GenericExtractor().extract("https://shop.example/p/mug", page)
        assert (result.title, result.price, result.currency) == ("Mug", 24.5, "GBP")
        assert result.method == "meta-tags"

    def test_platform_selectors(self):
        page = '<h1>Mug</h1><div class="product__price">$15.00</div>'
        result = GenericExtractor().extract("https://shop.example/products/mug", page)
        assert result.price == 15.0
        assert result.currency == "USD"
        assert result.method == "platform-selectors"

    def test_generic_patterns_prefer_current_price(self):
        page = '<h1>Mug</h1><div class="old-price">29,99 €</div><div class="sale-price">19,99 €</div>'
        result = GenericExtractor().extract("https://shop.example/p/mug", page)
        assert result.price == 19.99
        assert result.method == "generic-patterns"

    def test_selector_hint_wins(self):
        page = '<h1>Mug</h1><div class="product__price">15 €</div><span class="now">7,50 €</span>'
        result = GenericExtractor().extract("https://shop.example/p/mug", page, selector_hint=".now")
        assert result.price == 7.5
        assert result.method == "custom-selector"

    def test_invalid_selector_hint(self):
        page = '<h1>Mug</h1><div class="product__price">15 €</div>'
        result = GenericExtractor("Shop").extract("https://shop.example/p/mug", page, selector_hint="div[[")
        assert result.error.startswith("Invalid price selector")
        assert result.title == "Mug"
        assert result.available is False

    def test_every_attempt_fails(self):
        result = GenericExtractor("Shop").extract("https://shop.example/p/mug", "<h1>Mug</h1><p>Call us</p>")
        assert result.error.startswith("Automatic extraction failed")
        assert result.title == "Mug"
        assert result.available is False


class TestManual:
    PAGE = """<head><meta property="og:title" content="Desk Lamp">
    <meta property="og:image" content="https://img/lamp.jpg"></head>
    <body><h1>Lamp</h1><span class="price-now">39,90 €</span></body>"""

    def test_reads_custom_selector(self):
        result = ManualExtractor().extract("https://lamps.example/p/1", self.PAGE, selector_hint=".price-now")
        assert result.price == 39.9
        assert result.currency == "EUR"
        assert result.title == "Desk Lamp"
        assert result.image_url == "https://img/lamp.jpg"
        assert result.method == "custom-selector"

    def test_requires_selector(self):
        result = ManualExtractor().extract("https://lamps.example/p/1", self.PAGE)
        assert result.error.startswith("Manual selection required")

    def test_selector_without_match(self):
        result = ManualExtractor().extract("https://lamps.example/p/1", self.PAGE, selector_hint=".gone")
        assert result.error.startswith("Price element not found")

    def test_invalid_selector(self):
        result = ManualExtractor().extract("https://lamps.example/p/1", self.PAGE, selector_hint="[[[")
        assert result.error.startswith("Invalid price selector")

    def test_unreadable_price(self):
        result = ManualExtractor().extract("https://lamps.example/p/1", self.PAGE, selector_hint="h1")
        assert result.error == "Could not parse price from the selected element"
