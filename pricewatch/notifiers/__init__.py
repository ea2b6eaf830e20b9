"""Notification backends."""

import logging

from pricewatch.models import PriceDropEvent
from pricewatch.notifiers.email import send_email_alert
from pricewatch.notifiers.telegram import send_telegram_alert

logger = logging.getLogger(__name__)


def send_price_drop_alert(event: PriceDropEvent) -> int:
    """Fan a price drop out to every configured channel; returns how many accepted it."""
    sent = 0
    if send_email_alert(event):
        sent += 1
    if send_telegram_alert(event):
        sent += 1
    if not sent:
        logger.warning(
            "Price drop for %s not delivered: configure SMTP_USER/SMTP_PASS or "
            "TELEGRAM_BOT_TOKEN/TELEGRAM_CHAT_ID",
            event.title[:50],
        )
    return sent


__all__ = ["send_email_alert", "send_telegram_alert", "send_price_drop_alert"]
