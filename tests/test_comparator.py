import pytest

from pricewatch import comparator
from pricewatch.models import Tier, TrackedItem


class TestPriceChanged:
    def test_within_epsilon(self):
        assert not comparator.price_changed(100.0, 100.0)
        assert not comparator.price_changed(100.0, 100.01)
        assert not comparator.price_changed(19.99, 20.0)

    def test_beyond_epsilon(self):
        assert comparator.price_changed(100.0, 100.02)
        assert comparator.price_changed(100.0, 97.0)


class TestShouldNotify:
    def test_ten_percent_drop(self):
        assert comparator.percent_drop(100.0, 90.0) == pytest.approx(10.0)
        assert comparator.should_notify(100.0, 90.0, 5.0)

    def test_below_threshold(self):
        assert not comparator.should_notify(100.0, 97.0, 5.0)

    def test_exactly_threshold(self):
        assert comparator.should_notify(100.0, 95.0, 5.0)

    def test_increase_or_unchanged(self):
        assert not comparator.should_notify(100.0, 120.0, 0.0)
        assert not comparator.should_notify(100.0, 100.0, 0.0)

    def test_no_previous_price(self):
        assert comparator.percent_drop(0.0, 10.0) == 0.0
        assert not comparator.should_notify(0.0, 10.0, 5.0)


def test_build_event(clock):
    item = TrackedItem(
        id="abc", url="https://shop.example/p/1", domain="shop.example", title="Lamp",
        tier_at_creation=Tier.MANUAL, current_price=30.0, initial_price=30.0,
        currency="EUR", added_at=clock(),
    )
    event = comparator.build_event(item, 30.0, 20.0)
    assert event.item_id == "abc"
    assert event.percent_drop == pytest.approx(33.33)
    assert event.url == item.url
