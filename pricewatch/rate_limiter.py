"""
Per-domain rate limiting with exponential backoff.

Each failing domain gets one bucket. Consecutive failures walk up
BACKOFF_MINUTES (1 min, 5 min, 30 min, 2 h, then stay at 2 h); the first
success deletes the bucket. Buckets live in the store so backoff survives
restarts.
"""

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Callable

from pricewatch.models import RateLimitBucket

logger = logging.getLogger(__name__)

BACKOFF_MINUTES = (1, 5, 30, 120)
MAX_BACKOFF_LEVEL = len(BACKOFF_MINUTES) - 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RateLimiter:
    """Backoff buckets keyed by domain."""

    def __init__(self, store, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    def is_allowed(self, domain: str) -> bool:
        """False while the domain's bucket has a retry time in the future."""
        bucket = self.store.get_bucket(domain)
        if bucket is None:
            return True
        limited = self.clock() < bucket.next_retry_at
        if limited:
            logger.debug(
                "Domain %s rate limited until %s (%d failures)",
                domain, bucket.next_retry_at.isoformat(), bucket.failure_count,
            )
        return not limited

    def record_success(self, domain: str) -> None:
        """Drop all accumulated backoff for the domain."""
        if self.store.delete_bucket(domain):
            logger.info("Rate limit cleared for %s", domain)

    def record_failure(
        self, domain: str, reason: str, outcome_id: str | None = None
    ) -> RateLimitBucket:
        """
        Escalate the domain's backoff by one level.

        ``outcome_id`` identifies the evaluation that failed; repeating a call
        with the id already recorded on the bucket leaves it unchanged.
        """
        now = self.clock()
        bucket = self.store.get_bucket(domain)

        if bucket is not None and outcome_id is not None and bucket.last_outcome_id == outcome_id:
            logger.debug("Failure %s for %s already recorded", outcome_id, domain)
            return bucket

        if bucket is None:
            level = 0
            failure_count = 1
            previous_retry = None
        else:
            level = min(bucket.backoff_level + 1, MAX_BACKOFF_LEVEL)
            failure_count = bucket.failure_count + 1
            previous_retry = bucket.next_retry_at

        next_retry_at = now + timedelta(minutes=BACKOFF_MINUTES[level])
        if previous_retry is not None and previous_retry > next_retry_at:
            next_retry_at = previous_retry

        new_bucket = RateLimitBucket(
            domain=domain,
            failure_count=failure_count,
            backoff_level=level,
            next_retry_at=next_retry_at,
            last_error=reason,
            last_outcome_id=outcome_id,
        )
        self.store.put_bucket(new_bucket)
        logger.warning(
            "Backoff for %s: %d failure(s), retry in %d min (%s)",
            domain, failure_count, BACKOFF_MINUTES[level], reason,
        )
        return new_bucket

    def minutes_until_retry(self, domain: str) -> int:
        bucket = self.store.get_bucket(domain)
        if bucket is None:
            return 0
        seconds = (bucket.next_retry_at - self.clock()).total_seconds()
        return max(0, math.ceil(seconds / 60))

    def clear(self, domain: str) -> bool:
        """Admin reset of one domain."""
        cleared = self.store.delete_bucket(domain)
        if cleared:
            logger.info("Rate limit manually cleared for %s", domain)
        return cleared

    def clear_all(self) -> int:
        count = self.store.clear_buckets()
        logger.info("Cleared %d rate limit bucket(s)", count)
        return count

    def status(self) -> list[RateLimitBucket]:
        return self.store.list_buckets()
