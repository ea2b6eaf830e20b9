"""Price text parsing shared by all extractors."""

import re

_NUMBER = re.compile(r"\d[\d.,\s ']*")
_SEPARATORS = re.compile(r"[\s ']")

CURRENCY_MARKERS = (
    ("EUR", ("€", "EUR")),
    ("USD", ("$", "USD")),
    ("GBP", ("£", "GBP")),
    ("JPY", ("¥", "JPY")),
)

PRICE_LIKE_PATTERNS = (
    re.compile(r"[€$£¥]\s*\d"),
    re.compile(r"\d+\s*[€$£¥]"),
    re.compile(r"\d+,\d{1,2}\b"),
    re.compile(r"\d+\.\d{1,2}\b"),
)

OUT_OF_STOCK_KEYWORDS = (
    "no disponible",
    "out of stock",
    "agotado",
    "not available",
    "sold out",
    "no hay stock",
    "temporarily unavailable",
    "currently unavailable",
)


def parse_price(text) -> float | None:
    """
    Parse a price from text such as '$1,299.99', '1.299,99 €' or '55,67'.

    The last ``.`` or ``,`` is the decimal separator when one or two digits
    follow it; every other separator is a thousands separator. Returns None
    when no positive number is found.
    """
    if text is None:
        return None
    if isinstance(text, (int, float)):
        return float(text) if text > 0 else None
    match = _NUMBER.search(str(text))
    if not match:
        return None
    number = _SEPARATORS.sub("", match.group(0)).rstrip(".,")
    last_sep = max(number.rfind(","), number.rfind("."))
    if last_sep == -1:
        value = number
    else:
        integer = re.sub(r"[.,]", "", number[:last_sep])
        decimals = number[last_sep + 1:]
        value = f"{integer}.{decimals}" if len(decimals) in (1, 2) else integer + decimals
    try:
        price = float(value)
    except ValueError:
        return None
    return price if price > 0 else None


def detect_currency(text: str | None, default: str = "EUR") -> str:
    if not text:
        return default
    for code, markers in CURRENCY_MARKERS:
        if any(marker in text for marker in markers):
            return code
    return default


def looks_like_price(text: str) -> bool:
    return any(pattern.search(text) for pattern in PRICE_LIKE_PATTERNS)


def is_out_of_stock(text: str | None) -> bool:
    if not text:
        return False
    lower = text.lower()
    return any(keyword in lower for keyword in OUT_OF_STOCK_KEYWORDS)
