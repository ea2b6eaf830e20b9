"""URL parsing helpers."""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def extract_domain(url: str) -> str | None:
    """
    Return the lower-cased host of ``url`` without a leading ``www.``.

    None when the URL has no scheme or host.
    """
    if not url:
        return None
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
    except ValueError:
        return None
    if parts.scheme not in ("http", "https") or not host:
        return None
    host = host.lower().rstrip(".")
    if host.startswith("www."):
        host = host[4:]
    return host or None


def normalize_url(url: str) -> str:
    """Drop tracking parameters (utm_*, ref*, tag) and the fragment."""
    try:
        parts = urlsplit(url.strip())
    except ValueError:
        return url
    params = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if not key.startswith("utm_") and not key.startswith("ref") and key != "tag"
    ]
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(params), ""))


def in_domain_list(host: str, domains) -> bool:
    """True if ``host`` equals or is a subdomain of any entry in ``domains``."""
    if host in domains:
        return True
    return any(host.endswith("." + domain) for domain in domains)
