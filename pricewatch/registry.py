"""Dispatch from support tier to the extractor that serves it."""

import logging
from typing import Iterable

from pricewatch.extractors import SPECIFIC_EXTRACTORS, Extractor, GenericExtractor, ManualExtractor
from pricewatch.fetchers import fetch_page
from pricewatch.models import Tier

logger = logging.getLogger(__name__)


class ExtractorRegistry:
    """
    Closed mapping over Tier.

    Built once at startup. Construction fails with ValueError when a tier has
    no binding or a site the resolver knows has no dedicated extractor, so a
    misconfigured deployment never reaches the first sweep.
    """

    def __init__(
        self,
        specific_site_names: Iterable[str],
        fetcher=fetch_page,
        specific_extractors: dict[str, type[Extractor]] | None = None,
    ):
        classes = SPECIFIC_EXTRACTORS if specific_extractors is None else specific_extractors
        missing = sorted(set(specific_site_names) - set(classes))
        if missing:
            raise ValueError(f"no extractor registered for specific site(s): {', '.join(missing)}")

        self._specific = {name: cls(fetcher) for name, cls in classes.items()}
        self._manual = ManualExtractor(fetcher)
        self._fetcher = fetcher
        self._bindings = {
            Tier.SPECIFIC: self._resolve_specific,
            Tier.WHITELIST: self._resolve_generic,
            Tier.MANUAL: self._resolve_manual,
            Tier.NONE: self._resolve_none,
        }
        unbound = [tier.value for tier in Tier if tier not in self._bindings]
        if unbound:
            raise ValueError(f"no binding for tier(s): {', '.join(unbound)}")

    def resolve(self, tier: Tier, site_hint: str | None = None) -> Extractor | None:
        """Extractor for ``tier``; None when the tier is unsupported."""
        return self._bindings[Tier(tier)](site_hint)

    def _resolve_specific(self, site_hint: str | None) -> Extractor | None:
        extractor = self._specific.get(site_hint or "")
        if extractor is None:
            logger.warning("No dedicated extractor for site %r", site_hint)
        return extractor

    def _resolve_generic(self, site_hint: str | None) -> Extractor:
        return GenericExtractor(site_hint, self._fetcher)

    def _resolve_manual(self, site_hint: str | None) -> Extractor:
        return self._manual

    def _resolve_none(self, site_hint: str | None) -> None:
        return None
