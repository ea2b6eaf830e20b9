"""Telegram push notification."""

import html
import logging
import os

import requests

from pricewatch.models import PriceDropEvent

logger = logging.getLogger(__name__)

TELEGRAM_API = "https://api.telegram.org/bot{token}/sendMessage"


def format_message(event: PriceDropEvent) -> str:
    return (
        f"📉 <b>Price drop</b>\n\n"
        f"<b>{html.escape(event.title[:80])}</b>\n"
        f"{event.old_price:,.2f} → {event.new_price:,.2f} (-{event.percent_drop:.1f}%)\n\n"
        f"{html.escape(event.url)}"
    )


def send_telegram_alert(event: PriceDropEvent) -> bool:
    """
    Send a price drop alert via Telegram Bot API.

    Requires TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID.
    """
    token = os.environ.get("TELEGRAM_BOT_TOKEN")
    chat_id = os.environ.get("TELEGRAM_CHAT_ID")

    if not token or not chat_id:
        logger.debug("Telegram: TELEGRAM_BOT_TOKEN or TELEGRAM_CHAT_ID not set")
        return False

    payload = {
        "chat_id": chat_id,
        "text": format_message(event),
        "parse_mode": "HTML",
        "disable_web_page_preview": True,
    }

    try:
        logger.debug("Telegram: sending alert for %s", event.title[:50])
        resp = requests.post(TELEGRAM_API.format(token=token), json=payload, timeout=10)
        if resp.status_code != 200:
            logger.error("Telegram API error (status %d): %s", resp.status_code, resp.text[:200])
        resp.raise_for_status()
        logger.info("Telegram: alert sent for %s", event.title[:50])
        return True
    except requests.exceptions.RequestException as e:
        logger.error("Telegram request failed: %s", e)
        return False
