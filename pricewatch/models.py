"""Data models for price tracking."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Tier(str, Enum):
    """Support tier of a URL, from most to least automated."""

    SPECIFIC = "specific"
    WHITELIST = "whitelist"
    MANUAL = "manual"
    NONE = "none"


@dataclass
class PriceEntry:
    """One observed price."""

    price: float
    recorded_at: datetime


@dataclass
class TrackedItem:
    """A product page whose price is re-checked on every sweep."""

    id: str
    url: str
    domain: str
    title: str
    tier_at_creation: Tier
    current_price: float
    initial_price: float
    currency: str
    added_at: datetime
    last_checked_at: datetime | None = None
    price_history: list[PriceEntry] = field(default_factory=list)
    is_active: bool = True
    site_name: str | None = None
    custom_selector: str | None = None
    image_url: str | None = None


@dataclass
class RateLimitBucket:
    """Backoff state for one domain."""

    domain: str
    failure_count: int
    backoff_level: int
    next_retry_at: datetime
    last_error: str | None = None
    last_outcome_id: str | None = None


@dataclass(frozen=True)
class TierClassification:
    """Result of classifying a URL (and optionally its document)."""

    tier: Tier
    domain: str | None = None
    site_name: str | None = None
    extraction_hint: str | None = None
    product_page: bool = False
    ecommerce_score: int | None = None
    actionable: bool = False

    @property
    def effective_tier(self) -> Tier:
        return self.tier if self.actionable else Tier.NONE


@dataclass
class ExtractionResult:
    """Normalized product data returned by an extractor."""

    title: str
    price: float
    currency: str
    available: bool
    image_url: str | None = None
    error: str | None = None
    method: str | None = None


@dataclass(frozen=True)
class PriceDropEvent:
    """Payload handed to notification sinks."""

    item_id: str
    title: str
    old_price: float
    new_price: float
    percent_drop: float
    url: str


@dataclass
class SweepSummary:
    """Aggregate outcome of one sweep."""

    checked: int = 0
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0
    duration_ms: int = 0
    cancelled: bool = False
