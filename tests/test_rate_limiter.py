from datetime import timedelta

import pytest

from pricewatch.rate_limiter import BACKOFF_MINUTES, RateLimiter


class TestBackoff:
    def test_unknown_domain_is_allowed(self, limiter):
        assert limiter.is_allowed("shop.example")
        assert limiter.minutes_until_retry("shop.example") == 0

    @pytest.mark.parametrize("failures, minutes", [(1, 1), (2, 5), (3, 30), (4, 120), (6, 120)])
    def test_escalation_table(self, limiter, clock, failures, minutes):
        for n in range(failures):
            limiter.record_failure("shop.example", "HTTP 503", outcome_id=f"o{n}")
        assert limiter.minutes_until_retry("shop.example") == minutes
        assert limiter.store.get_bucket("shop.example").backoff_level == min(failures - 1, 3)

    def test_blocked_until_retry_time(self, limiter, clock):
        limiter.record_failure("shop.example", "HTTP 429")
        assert not limiter.is_allowed("shop.example")
        clock.advance(seconds=59)
        assert not limiter.is_allowed("shop.example")
        clock.advance(seconds=1)
        assert limiter.is_allowed("shop.example")

    def test_minutes_until_retry_rounds_up(self, limiter, clock):
        limiter.record_failure("shop.example", "HTTP 429")
        limiter.record_failure("shop.example", "HTTP 429")
        clock.advance(seconds=61)
        # 5 min - 61 s = 239 s
        assert limiter.minutes_until_retry("shop.example") == 4
        clock.advance(minutes=10)
        assert limiter.minutes_until_retry("shop.example") == 0

    def test_next_retry_never_moves_earlier(self, limiter, clock):
        retries = []
        for n in range(6):
            retries.append(limiter.record_failure("shop.example", "timeout", f"o{n}").next_retry_at)
            clock.advance(seconds=30)
        assert retries == sorted(retries)

    def test_success_resets_and_restarts_at_level_zero(self, limiter, clock):
        for n in range(3):
            limiter.record_failure("shop.example", "HTTP 503", f"o{n}")
        limiter.record_success("shop.example")

        assert limiter.is_allowed("shop.example")
        assert limiter.store.get_bucket("shop.example") is None

        bucket = limiter.record_failure("shop.example", "HTTP 503", "again")
        assert bucket.backoff_level == 0
        assert bucket.failure_count == 1
        assert bucket.next_retry_at == clock() + timedelta(minutes=BACKOFF_MINUTES[0])

    def test_repeated_outcome_is_counted_once(self, limiter):
        first = limiter.record_failure("shop.example", "HTTP 503", "sweep-1:item-1")
        again = limiter.record_failure("shop.example", "HTTP 503", "sweep-1:item-1")
        assert again == first
        assert limiter.store.get_bucket("shop.example").failure_count == 1

    def test_domains_are_independent(self, limiter):
        limiter.record_failure("a.example", "HTTP 503")
        assert not limiter.is_allowed("a.example")
        assert limiter.is_allowed("b.example")

    def test_backoff_survives_restart(self, store, clock):
        RateLimiter(store, clock).record_failure("shop.example", "HTTP 503")
        assert not RateLimiter(store, clock).is_allowed("shop.example")


class TestAdmin:
    def test_clear_one_domain(self, limiter):
        limiter.record_failure("a.example", "x")
        assert limiter.clear("a.example") is True
        assert limiter.clear("a.example") is False
        assert limiter.is_allowed("a.example")

    def test_clear_all_and_status(self, limiter):
        limiter.record_failure("b.example", "x")
        limiter.record_failure("a.example", "y")
        assert [b.domain for b in limiter.status()] == ["a.example", "b.example"]
        assert limiter.clear_all() == 2
        assert limiter.status() == []
