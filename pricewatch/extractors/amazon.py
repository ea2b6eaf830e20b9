"""Amazon product pages (amazon.com, amazon.es, amazon.co.uk...)."""

from pricewatch.extractors.base import Extractor


class AmazonExtractor(Extractor):
    name = "amazon"
    title_selectors = (
        "#productTitle",
        "#title",
        "h1.product-title",
        "h1 span#productTitle",
    )
    price_selectors = (
        ".a-price .a-offscreen",
        '.a-price[data-a-color="price"] .a-offscreen',
        "#priceblock_ourprice",
        "#priceblock_dealprice",
        "#corePrice_feature_div .a-price-whole",
        ".a-price-whole",
    )
    image_selectors = (
        "#landingImage",
        "#imgBlkFront",
        "#main-image",
        ".a-dynamic-image",
    )
    availability_selectors = ("#availability",)
