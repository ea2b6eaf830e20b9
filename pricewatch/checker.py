"""
Sweep orchestration: re-check every tracked item once per cycle.

A sweep walks the active items in insertion order. Items whose domain is
backing off are skipped; the rest are classified, extracted and compared
against the stored price. Every failure is contained to its item and fed to
the rate limiter exactly once.
"""

import logging
import threading
import time
import uuid
from datetime import datetime, timedelta
from typing import Callable

from pricewatch import comparator
from pricewatch.config import ExtensionConfig, load_config
from pricewatch.errors import (
    ExtractionError,
    PriceWatchError,
    StoreError,
    SweepInProgress,
    TrackingError,
    TransportError,
    Unavailable,
)
from pricewatch.extractors.base import selector_error
from pricewatch.fetchers import fetch_page
from pricewatch.models import (
    ExtractionResult,
    PriceDropEvent,
    PriceEntry,
    SweepSummary,
    Tier,
    TrackedItem,
)
from pricewatch.rate_limiter import utcnow
from pricewatch.urls import extract_domain, normalize_url

logger = logging.getLogger(__name__)

Notifier = Callable[[PriceDropEvent], object]


class PriceChecker:
    """Ties resolver, registry, limiter and store together for one sweep at a time."""

    def __init__(
        self,
        store,
        resolver,
        registry,
        limiter,
        notify: Notifier | None = None,
        clock: Callable[[], datetime] = utcnow,
        sleep: Callable[[float], None] = time.sleep,
        config_loader: Callable[[], ExtensionConfig] | None = None,
        fetcher=fetch_page,
    ):
        self.store = store
        self.resolver = resolver
        self.registry = registry
        self.limiter = limiter
        self.notify = notify
        self.clock = clock
        self.sleep = sleep
        self.config_loader = config_loader or (lambda: load_config(store))
        self.fetcher = fetcher
        self._lock = threading.Lock()
        self._stop = threading.Event()

    # ── Sweeps ────────────────────────────────────────────────────────────────

    def run_sweep(self) -> SweepSummary:
        """
        Check every active item once.

        Raises SweepInProgress if another sweep holds the lock, and StoreError
        if the item list cannot be read. Per-item errors never escape.
        """
        if not self._lock.acquire(blocking=False):
            raise SweepInProgress("a sweep is already running")
        try:
            return self._sweep()
        finally:
            self._lock.release()

    def trigger_now(self) -> SweepSummary | None:
        """Manual trigger; returns None when a sweep is already running."""
        try:
            return self.run_sweep()
        except SweepInProgress:
            logger.warning("Check requested while a sweep is running, ignored")
            return None

    def request_stop(self) -> None:
        """Stop the running sweep before its next item."""
        self._stop.set()

    def is_due(self, config: ExtensionConfig | None = None) -> bool:
        config = config or self.config_loader()
        last = self.store.get_last_sweep_at()
        if last is None:
            return True
        return self.clock() - last >= timedelta(minutes=config.check_interval_minutes)

    def _sweep(self) -> SweepSummary:
        self._stop.clear()
        started = time.monotonic()
        config = self.config_loader()
        sweep_id = uuid.uuid4().hex
        items = [item for item in self.store.list_items() if item.is_active]
        logger.info("Sweep %s started: %d active item(s)", sweep_id[:8], len(items))

        summary = SweepSummary()
        evaluated = 0
        for item in items:
            if self._stop.is_set():
                summary.cancelled = True
                logger.info("Sweep %s stopped after %d item(s)", sweep_id[:8], summary.checked)
                break

            summary.checked += 1
            if not self._allowed(item):
                summary.skipped += 1
                continue

            if evaluated:
                self.sleep(config.item_delay_seconds)
            evaluated += 1

            if self._evaluate(item, config, f"{sweep_id}:{item.id}"):
                summary.succeeded += 1
            else:
                summary.failed += 1

        summary.duration_ms = int((time.monotonic() - started) * 1000)
        if not summary.cancelled:
            self.store.set_last_sweep_at(self.clock())
        logger.info(
            "Sweep %s finished: %d checked, %d ok, %d failed, %d skipped (%d ms)",
            sweep_id[:8], summary.checked, summary.succeeded,
            summary.failed, summary.skipped, summary.duration_ms,
        )
        return summary

    def _allowed(self, item: TrackedItem) -> bool:
        try:
            allowed = self.limiter.is_allowed(item.domain)
        except StoreError as e:
            logger.error("Rate limit lookup failed for %s: %s", item.domain, e)
            return False
        if not allowed:
            try:
                remaining = self.limiter.minutes_until_retry(item.domain)
            except StoreError as e:
                logger.error("Rate limit lookup failed for %s: %s", item.domain, e)
                remaining = "?"
            logger.info("Skipping %s: %s rate limited for %s more min", item.title[:50], item.domain, remaining)
        return allowed

    def _evaluate(self, item: TrackedItem, config: ExtensionConfig, outcome_id: str) -> bool:
        """Check one item; True on success. Records exactly one limiter outcome."""
        try:
            self.check_item(item, config)
        except PriceWatchError as e:
            logger.warning("Check failed for %s: %s", item.url, e)
            self._record_failure(item, str(e), outcome_id)
            return False
        except Exception as e:
            logger.exception("Unexpected error checking %s", item.url)
            self._record_failure(item, f"{type(e).__name__}: {e}", outcome_id)
            return False

        try:
            self.limiter.record_success(item.domain)
        except StoreError as e:
            logger.error("Could not reset rate limit for %s: %s", item.domain, e)
        return True

    def _record_failure(self, item: TrackedItem, reason: str, outcome_id: str) -> None:
        try:
            self.limiter.record_failure(item.domain, reason, outcome_id)
        except StoreError as e:
            logger.error("Could not record failure for %s: %s", item.domain, e)

    # ── Single item ───────────────────────────────────────────────────────────

    def check_item(self, item: TrackedItem, config: ExtensionConfig | None = None) -> PriceDropEvent | None:
        """
        Fetch the item's current price and apply it.

        Raises Unavailable when the item has no extractor or is out of stock,
        ExtractionError when no price could be read, TransportError when the
        page could not be fetched.
        """
        config = config or self.config_loader()
        classification = self.resolver.classify(item.url)
        extractor = self.registry.resolve(classification.tier, classification.site_name)
        if extractor is None:
            raise Unavailable("No extractor available")

        result = extractor.extract(item.url, selector_hint=item.custom_selector)
        if result.error:
            raise ExtractionError(result.error)
        if not result.available:
            raise Unavailable("Product unavailable")
        if result.price <= 0:
            raise ExtractionError("Extracted price is not positive")
        return self.apply_result(item, result, config)

    def apply_result(
        self, item: TrackedItem, result: ExtractionResult, config: ExtensionConfig
    ) -> PriceDropEvent | None:
        """
        Record an observed price for ``item``.

        The observation is always appended to the history and stamps
        ``last_checked_at``; ``current_price`` only moves when the price
        changed by more than comparator.EPSILON. The notification, if any,
        goes out after the write has been committed.
        """
        now = self.clock()
        old_price = item.current_price
        new_price = result.price
        changed = comparator.price_changed(old_price, new_price)
        entry = PriceEntry(price=new_price, recorded_at=now)

        self.store.record_observation(
            item.id,
            entry,
            config.max_history_entries,
            current_price=new_price if changed else None,
        )
        item.price_history = (item.price_history + [entry])[-config.max_history_entries:]
        item.last_checked_at = now
        if changed:
            item.current_price = new_price
            logger.info("%s: %.2f -> %.2f %s", item.title[:50], old_price, new_price, item.currency)
        else:
            logger.debug("%s: price unchanged at %.2f", item.title[:50], new_price)

        if not config.notifications_enabled:
            return None
        if not comparator.should_notify(old_price, new_price, config.price_drop_threshold_percent):
            return None

        event = comparator.build_event(item, old_price, new_price)
        logger.info("Price drop: %s -%.1f%%", item.title[:50], event.percent_drop)
        self._send(event)
        return event

    def _send(self, event: PriceDropEvent) -> None:
        if self.notify is None:
            return
        try:
            self.notify(event)
        except Exception:
            logger.exception("Notification for %s failed", event.item_id)

    # ── Tracking ──────────────────────────────────────────────────────────────

    def track(self, url: str, selector: str | None = None) -> TrackedItem:
        """
        Start tracking ``url`` and store its first observed price.

        Raises TrackingError when the URL is unsupported, already tracked,
        over the item limit, has an invalid price selector, or its price
        cannot be extracted.
        """
        url = normalize_url(url.strip())
        domain = extract_domain(url)
        if domain is None:
            raise TrackingError(f"Invalid URL: {url}")
        error = selector_error(selector) if selector else None
        if error:
            raise TrackingError(error)

        config = self.config_loader()
        if self.store.find_item_by_url(url) is not None:
            raise TrackingError("This product is already being tracked")
        if self.store.count_items() >= config.max_tracked_items:
            raise TrackingError(f"Limit of {config.max_tracked_items} tracked products reached")

        html = None
        classification = self.resolver.classify(url)
        if classification.tier is Tier.MANUAL:
            # Unknown domain: the store verdict needs the page itself
            html = self._fetch_for_tracking(url)
            classification = self.resolver.classify(url, html)

        if classification.tier is Tier.NONE:
            raise TrackingError(f"{domain} is not supported")
        if not classification.actionable:
            raise TrackingError(f"{url} does not look like a product page")
        if classification.tier is Tier.MANUAL and not selector:
            raise TrackingError("Manual selection required: pass a CSS selector for the price")

        extractor = self.registry.resolve(classification.tier, classification.site_name)
        if extractor is None:
            raise TrackingError(f"No extractor available for {domain}")
        try:
            result = extractor.extract(url, html=html, selector_hint=selector)
        except TransportError as e:
            raise TrackingError(f"Could not load {url}: {e}") from e
        if result.error or result.price <= 0:
            raise TrackingError(result.error or "Could not read a price from the page")

        now = self.clock()
        item = TrackedItem(
            id=uuid.uuid4().hex,
            url=url,
            domain=domain,
            title=result.title,
            tier_at_creation=classification.tier,
            current_price=result.price,
            initial_price=result.price,
            currency=result.currency,
            added_at=now,
            last_checked_at=now,
            price_history=[PriceEntry(price=result.price, recorded_at=now)],
            site_name=classification.site_name,
            custom_selector=selector,
            image_url=result.image_url,
        )
        self.store.save_item(item)
        logger.info(
            "Tracking %s at %.2f %s (%s tier)",
            item.title[:50], item.current_price, item.currency, item.tier_at_creation.value,
        )
        return item

    def _fetch_for_tracking(self, url: str) -> str:
        try:
            return self.fetcher(url)
        except TransportError as e:
            raise TrackingError(f"Could not load {url}: {e}") from e

    def untrack(self, item_id: str) -> bool:
        removed = self.store.remove_item(item_id)
        if removed:
            logger.info("Stopped tracking %s", item_id)
        return removed
