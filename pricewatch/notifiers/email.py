"""Email notification via SMTP (Gmail)."""

import logging
import os
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from pricewatch.models import PriceDropEvent

logger = logging.getLogger(__name__)

SMTP_HOST = "smtp.gmail.com"
SMTP_PORT = 587


def format_email(event: PriceDropEvent) -> tuple[str, str]:
    """Subject and plain-text body for a price drop."""
    subject = f"Price drop: {event.title[:50]} now {event.new_price:,.2f} (-{event.percent_drop:.1f}%)"
    body = f"""
pricewatch - Price Drop

Product: {event.title}
Was: {event.old_price:,.2f}
Now: {event.new_price:,.2f} (-{event.percent_drop:.1f}%)

URL: {event.url}
"""
    return subject, body.strip()


def send_email_alert(event: PriceDropEvent) -> bool:
    """
    Send a price drop email.

    Uses SMTP_USER and SMTP_PASS (Gmail App Password).
    SMTP_TO defaults to SMTP_USER if not set.
    """
    user = os.environ.get("SMTP_USER")
    password = os.environ.get("SMTP_PASS")
    to_addr = os.environ.get("SMTP_TO", user)

    if not user or not password:
        logger.debug("Email: SMTP_USER or SMTP_PASS not set")
        return False

    subject, body = format_email(event)
    msg = MIMEMultipart()
    msg["From"] = user
    msg["To"] = to_addr
    msg["Subject"] = subject
    msg.attach(MIMEText(body, "plain"))

    try:
        logger.debug("Email: sending alert to %s", to_addr)
        with smtplib.SMTP(SMTP_HOST, SMTP_PORT, timeout=30) as server:
            server.starttls()
            server.login(user, password)
            server.sendmail(user, to_addr, msg.as_string())
        logger.info("Email: alert sent for %s", event.title[:50])
        return True
    except smtplib.SMTPAuthenticationError as e:
        logger.error("Email authentication failed: %s", e)
        return False
    except (smtplib.SMTPException, OSError) as e:
        logger.error("Email SMTP error: %s", e)
        return False
