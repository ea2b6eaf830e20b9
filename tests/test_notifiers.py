import smtplib

import pytest
import requests

from pricewatch import notifiers
from pricewatch.models import PriceDropEvent
from pricewatch.notifiers import email, telegram

EVENT = PriceDropEvent(
    item_id="item-1",
    title="Desk Lamp <XL>",
    old_price=100.0,
    new_price=90.0,
    percent_drop=10.0,
    url="https://lamps.example/p/1",
)


class FakeResponse:
    def __init__(self, status_code=200, text="{}"):
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


@pytest.fixture
def telegram_env(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "42")


class TestTelegram:
    def test_not_configured(self, monkeypatch):
        monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
        assert telegram.send_telegram_alert(EVENT) is False

    def test_sends_html_message(self, telegram_env, monkeypatch):
        calls = []

        def fake_post(url, json, timeout):
            calls.append((url, json))
            return FakeResponse()

        monkeypatch.setattr(telegram.requests, "post", fake_post)

        assert telegram.send_telegram_alert(EVENT) is True
        url, payload = calls[0]
        assert url == "https://api.telegram.org/bot123:abc/sendMessage"
        assert payload["chat_id"] == "42"
        assert payload["parse_mode"] == "HTML"
        assert "Desk Lamp &lt;XL&gt;" in payload["text"]
        assert "100.00 → 90.00 (-10.0%)" in payload["text"]

    def test_api_error(self, telegram_env, monkeypatch):
        monkeypatch.setattr(telegram.requests, "post", lambda *a, **kw: FakeResponse(400, "bad chat"))
        assert telegram.send_telegram_alert(EVENT) is False

    def test_connection_error(self, telegram_env, monkeypatch):
        def boom(*args, **kwargs):
            raise requests.ConnectionError("offline")

        monkeypatch.setattr(telegram.requests, "post", boom)
        assert telegram.send_telegram_alert(EVENT) is False


class FakeSMTP:
    sent = []

    def __init__(self, host, port, timeout=None):
        self.host = host

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        pass

    def login(self, user, password):
        if password == "wrong":
            raise smtplib.SMTPAuthenticationError(535, b"bad credentials")

    def sendmail(self, from_addr, to_addr, message):
        FakeSMTP.sent.append((from_addr, to_addr, message))


class TestEmail:
    @pytest.fixture(autouse=True)
    def fake_smtp(self, monkeypatch):
        FakeSMTP.sent = []
        monkeypatch.setattr(email.smtplib, "SMTP", FakeSMTP)
        monkeypatch.setenv("SMTP_USER", "me@example.com")
        monkeypatch.delenv("SMTP_TO", raising=False)

    def test_not_configured(self, monkeypatch):
        monkeypatch.delenv("SMTP_PASS", raising=False)
        assert email.send_email_alert(EVENT) is False

    def test_sends_to_self_by_default(self, monkeypatch):
        monkeypatch.setenv("SMTP_PASS", "app-password")
        assert email.send_email_alert(EVENT) is True
        from_addr, to_addr, message = FakeSMTP.sent[0]
        assert from_addr == to_addr == "me@example.com"
        assert "Price drop" in message

    def test_auth_failure(self, monkeypatch):
        monkeypatch.setenv("SMTP_PASS", "wrong")
        assert email.send_email_alert(EVENT) is False

    def test_format(self):
        subject, body = email.format_email(EVENT)
        assert subject.startswith("Price drop: Desk Lamp <XL> now 90.00")
        assert "Was: 100.00" in body
        assert EVENT.url in body


def test_fan_out_counts_channels(monkeypatch):
    monkeypatch.setattr(notifiers, "send_email_alert", lambda event: True)
    monkeypatch.setattr(notifiers, "send_telegram_alert", lambda event: False)
    assert notifiers.send_price_drop_alert(EVENT) == 1
