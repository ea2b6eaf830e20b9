"""Support tier resolution for product URLs."""

import logging
from typing import Mapping

from bs4 import BeautifulSoup

from pricewatch.errors import ClassificationAmbiguous
from pricewatch.models import Tier, TierClassification
from pricewatch.resolver import product_page
from pricewatch.resolver.ecommerce import detect_ecommerce
from pricewatch.resolver.sites import (
    NON_ECOMMERCE_DOMAINS,
    SPECIFIC_SITES,
    WHITELIST_SITES,
    SpecificSite,
)
from pricewatch.urls import extract_domain, in_domain_list

logger = logging.getLogger(__name__)

GENERIC_HINT = "generic"
MANUAL_HINT = "manual"


class SupportTierResolver:
    """
    Classify URLs into support tiers.

    Precedence: a specific extractor's domain beats the whitelist, the
    whitelist beats the manual tier, and anything else is unsupported.
    Specific and whitelist tiers are actionable only on product pages;
    the manual tier additionally needs the document to look like a store.
    """

    def __init__(
        self,
        specific_sites: tuple[SpecificSite, ...] = SPECIFIC_SITES,
        whitelist: Mapping[str, str] = WHITELIST_SITES,
    ):
        self.specific_sites = specific_sites
        self.whitelist = whitelist

    @property
    def specific_names(self) -> frozenset[str]:
        return frozenset(site.name for site in self.specific_sites)

    def _specific_site(self, host: str) -> SpecificSite | None:
        for site in self.specific_sites:
            if site.matches(host):
                return site
        return None

    def _whitelist_name(self, host: str) -> str | None:
        if host in self.whitelist:
            return self.whitelist[host]
        for domain, name in self.whitelist.items():
            if host.endswith("." + domain):
                return name
        return None

    def _domain(self, url: str) -> str:
        domain = extract_domain(url)
        if domain is None:
            raise ClassificationAmbiguous(f"cannot determine domain of {url!r}")
        return domain

    def classify(self, url: str, document: str | BeautifulSoup | None = None) -> TierClassification:
        """
        Classify ``url``; ``document`` (HTML) is only consulted for unknown domains.

        Never raises: malformed input resolves to Tier.NONE.
        """
        try:
            domain = self._domain(url)
        except ClassificationAmbiguous as e:
            logger.debug("Classification ambiguous: %s", e)
            return TierClassification(tier=Tier.NONE)

        site = self._specific_site(domain)
        if site is not None:
            is_product = product_page.is_product_page(url, site.name)
            return TierClassification(
                tier=Tier.SPECIFIC,
                domain=domain,
                site_name=site.name,
                extraction_hint=site.name,
                product_page=is_product,
                actionable=is_product,
            )

        store_name = self._whitelist_name(domain)
        if store_name is not None:
            is_product = product_page.is_product_page(url)
            return TierClassification(
                tier=Tier.WHITELIST,
                domain=domain,
                site_name=store_name,
                extraction_hint=GENERIC_HINT,
                product_page=is_product,
                actionable=is_product,
            )

        if in_domain_list(domain, NON_ECOMMERCE_DOMAINS):
            return TierClassification(tier=Tier.NONE, domain=domain)

        is_product = product_page.is_product_page(url)
        if document is None:
            # The store verdict needs the page; report the candidate tier only.
            return TierClassification(
                tier=Tier.MANUAL,
                domain=domain,
                site_name=domain,
                extraction_hint=MANUAL_HINT,
                product_page=is_product,
            )

        verdict = detect_ecommerce(url, document)
        if not verdict.is_ecommerce:
            return TierClassification(
                tier=Tier.NONE, domain=domain, ecommerce_score=verdict.score
            )
        return TierClassification(
            tier=Tier.MANUAL,
            domain=domain,
            site_name=domain,
            extraction_hint=MANUAL_HINT,
            product_page=is_product,
            ecommerce_score=verdict.score,
            actionable=is_product,
        )

    def explain(self, url: str, document: str | None = None) -> str:
        """Human-readable reason for the classification of ``url``."""
        result = self.classify(url, document)
        if result.domain is None:
            return "Unable to analyze this URL"
        site = result.site_name if result.tier is Tier.SPECIFIC else None
        page = product_page.explain(url, site)
        if result.tier is Tier.SPECIFIC:
            return f"Dedicated extractor for {result.site_name}. {page}"
        if result.tier is Tier.WHITELIST:
            return f"Verified store {result.site_name}. {page}"
        if result.tier is Tier.MANUAL:
            if result.ecommerce_score is None:
                return f"Unknown store {result.domain}, manual price selection. {page}"
            return (
                f"Looks like a store (score {result.ecommerce_score}), "
                f"manual price selection. {page}"
            )
        return detect_ecommerce(url, document).reason


__all__ = ["SupportTierResolver", "GENERIC_HINT", "MANUAL_HINT"]
