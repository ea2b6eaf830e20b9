"""Price change detection and notification threshold logic."""

from pricewatch.models import PriceDropEvent, TrackedItem

# Prices closer than this are treated as unchanged
EPSILON = 0.01


def price_changed(old_price: float, new_price: float) -> bool:
    # Compare at cent precision so float noise never crosses the boundary
    return round(abs(new_price - old_price), 2) > EPSILON


def percent_drop(old_price: float, new_price: float) -> float:
    """
    Drop from ``old_price`` to ``new_price`` as a percentage of ``old_price``.

    Negative for increases; 0 when there is no meaningful old price.
    """
    if old_price <= 0:
        return 0.0
    return (old_price - new_price) / old_price * 100


def should_notify(old_price: float, new_price: float, threshold_percent: float) -> bool:
    """
    Return True if the price fell by at least ``threshold_percent``.
    Unchanged prices (within EPSILON) never notify.
    """
    if old_price <= 0 or not price_changed(old_price, new_price):
        return False
    if new_price >= old_price:
        return False
    return percent_drop(old_price, new_price) >= threshold_percent


def build_event(item: TrackedItem, old_price: float, new_price: float) -> PriceDropEvent:
    return PriceDropEvent(
        item_id=item.id,
        title=item.title,
        old_price=old_price,
        new_price=new_price,
        percent_drop=round(percent_drop(old_price, new_price), 2),
        url=item.url,
    )
