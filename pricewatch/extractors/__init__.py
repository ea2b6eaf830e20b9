"""Product extractors: one per specific store, plus generic and manual."""

from pricewatch.extractors.aliexpress import AliExpressExtractor
from pricewatch.extractors.amazon import AmazonExtractor
from pricewatch.extractors.base import Extractor
from pricewatch.extractors.ebay import EbayExtractor
from pricewatch.extractors.generic import GenericExtractor
from pricewatch.extractors.manual import ManualExtractor
from pricewatch.extractors.mediamarkt import MediaMarktExtractor
from pricewatch.extractors.pccomponentes import PcComponentesExtractor

# Keyed by the site names the resolver reports for the specific tier
SPECIFIC_EXTRACTORS: dict[str, type[Extractor]] = {
    "amazon": AmazonExtractor,
    "ebay": EbayExtractor,
    "aliexpress": AliExpressExtractor,
    "pccomponentes": PcComponentesExtractor,
    "mediamarkt": MediaMarktExtractor,
}

__all__ = [
    "Extractor",
    "GenericExtractor",
    "ManualExtractor",
    "SPECIFIC_EXTRACTORS",
    "AmazonExtractor",
    "EbayExtractor",
    "AliExpressExtractor",
    "PcComponentesExtractor",
    "MediaMarktExtractor",
]
