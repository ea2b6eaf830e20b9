from pricewatch.models import Tier
from pricewatch.resolver import SupportTierResolver
from pricewatch.resolver.sites import SPECIFIC_SITES, WHITELIST_SITES

from conftest import STORE_PAGE

PLAIN_PAGE = "<html><body><h1>About us</h1><p>We write about lamps.</p></body></html>"


class TestSpecificTier:
    def test_product_page(self):
        result = SupportTierResolver().classify("https://amazon.example/dp/ABC123")
        assert result.tier is Tier.SPECIFIC
        assert result.site_name == "amazon"
        assert result.product_page is True
        assert result.actionable is True

    def test_cart_page_is_not_actionable(self):
        result = SupportTierResolver().classify("https://amazon.example/gp/cart")
        assert result.tier is Tier.SPECIFIC
        assert result.actionable is False
        assert result.effective_tier is Tier.NONE

    def test_generic_markers_do_not_count_on_sites_with_their_own(self):
        reviews = SupportTierResolver().classify("https://www.amazon.es/product-reviews/B0ABCDEF12")
        assert reviews.tier is Tier.SPECIFIC
        assert reviews.actionable is False

        campaign = SupportTierResolver().classify("https://www.aliexpress.com/p/calp-plus/index.html")
        assert campaign.tier is Tier.SPECIFIC
        assert campaign.actionable is False

    def test_specific_beats_whitelist(self):
        assert "amazon.com" in WHITELIST_SITES
        result = SupportTierResolver().classify("https://www.amazon.com/dp/B0ABCDEF12")
        assert result.tier is Tier.SPECIFIC
        assert result.extraction_hint == "amazon"

    def test_subdomain_of_specific_site(self):
        result = SupportTierResolver().classify("https://es.aliexpress.com/item/100500.html")
        assert result.tier is Tier.SPECIFIC
        assert result.site_name == "aliexpress"


class TestWhitelistTier:
    def test_known_store(self):
        result = SupportTierResolver().classify("https://www.zalando.es/nike-air-zoom-pegasus-123456789.html")
        assert result.tier is Tier.WHITELIST
        assert result.site_name == "Zalando España"
        assert result.extraction_hint == "generic"

    def test_custom_whitelist(self):
        resolver = SupportTierResolver(whitelist={"lamps.example": "Lamps"})
        result = resolver.classify("https://shop.lamps.example/p/desk-lamp")
        assert result.tier is Tier.WHITELIST
        assert result.site_name == "Lamps"
        assert result.actionable


class TestManualAndNone:
    def test_non_store_domain(self):
        result = SupportTierResolver().classify("https://www.youtube.com/watch?v=abc")
        assert result.tier is Tier.NONE

    def test_unknown_domain_without_document(self):
        result = SupportTierResolver().classify("https://lamps.example/p/desk-lamp-123456")
        assert result.tier is Tier.MANUAL
        assert result.ecommerce_score is None
        assert result.actionable is False

    def test_unknown_domain_that_looks_like_a_store(self):
        result = SupportTierResolver().classify("https://lamps.example/p/desk-lamp-123456", STORE_PAGE)
        assert result.tier is Tier.MANUAL
        assert result.ecommerce_score >= 50
        assert result.actionable is True

    def test_unknown_domain_without_store_signals(self):
        result = SupportTierResolver().classify("https://lamps.example/about", PLAIN_PAGE)
        assert result.tier is Tier.NONE
        assert result.ecommerce_score is not None

    def test_malformed_urls_never_raise(self):
        resolver = SupportTierResolver()
        for url in ("", "not a url", "ftp://files.example/x", "https://"):
            assert resolver.classify(url).tier is Tier.NONE


def test_explain_mentions_tier():
    resolver = SupportTierResolver()
    assert resolver.explain("https://amazon.example/dp/ABC123").startswith("Dedicated extractor for amazon")
    assert "Not a product page" in resolver.explain("https://amazon.example/gp/cart")
    assert resolver.explain("not a url") == "Unable to analyze this URL"


def test_specific_names_cover_every_dedicated_site():
    assert SupportTierResolver().specific_names == {site.name for site in SPECIFIC_SITES}
