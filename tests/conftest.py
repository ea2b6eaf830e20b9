from datetime import datetime, timedelta, timezone

import pytest

from pricewatch.checker import PriceChecker
from pricewatch.config import ExtensionConfig
from pricewatch.models import ExtractionResult, PriceEntry, Tier, TrackedItem
from pricewatch.rate_limiter import RateLimiter
from pricewatch.resolver import SupportTierResolver
from pricewatch.storage import Store

START = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

STORE_PAGE = """
<html><head>
<script type="application/ld+json">
{"@type": "Product", "name": "Desk Lamp", "offers": {"price": "39.90", "priceCurrency": "EUR"}}
</script>
</head><body><h1>Desk Lamp</h1><span class="price-now">39,90 €</span></body></html>
"""


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class StubExtractor:
    """Returns (or raises) a queued outcome per URL and records every call."""

    def __init__(self, outcomes=None):
        self.outcomes = dict(outcomes or {})
        self.calls = []

    def extract(self, url, html=None, selector_hint=None):
        self.calls.append(url)
        outcome = self.outcomes[url]
        if callable(outcome):
            outcome = outcome()
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class StubRegistry:
    def __init__(self, extractor):
        self.extractor = extractor

    def resolve(self, tier, site_hint=None):
        return None if tier is Tier.NONE else self.extractor


def ok(price: float, title: str = "Widget") -> ExtractionResult:
    return ExtractionResult(title=title, price=price, currency="EUR", available=True)


@pytest.fixture
def store(tmp_path):
    store = Store(tmp_path / "pricewatch.db")
    store.init_db()
    return store


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def limiter(store, clock):
    return RateLimiter(store, clock=clock)


@pytest.fixture
def extractor():
    return StubExtractor()


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def config():
    return ExtensionConfig()


@pytest.fixture
def checker(store, limiter, extractor, notifications, clock, sleeps, config):
    return PriceChecker(
        store=store,
        resolver=SupportTierResolver(),
        registry=StubRegistry(extractor),
        limiter=limiter,
        notify=notifications.append,
        clock=clock,
        sleep=sleeps.append,
        config_loader=lambda: config,
        fetcher=lambda url: STORE_PAGE,
    )


@pytest.fixture
def make_item(store, clock):
    """Persist a tracked item whose first observation is ``price``."""
    counter = iter(range(1, 1000))

    def _make(url=None, price=100.0, **overrides):
        n = next(counter)
        url = url or f"https://shop{n}.example/p/widget-{n:06d}"
        item = TrackedItem(
            id=f"item-{n}",
            url=url,
            domain=url.split("/")[2],
            title=f"Widget {n}",
            tier_at_creation=Tier.MANUAL,
            current_price=price,
            initial_price=price,
            currency="EUR",
            added_at=clock(),
            price_history=[PriceEntry(price=price, recorded_at=clock())],
            custom_selector=".price",
        )
        for key, value in overrides.items():
            setattr(item, key, value)
        store.save_item(item)
        return item

    return _make
