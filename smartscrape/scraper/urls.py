"""URL validation helpers.  Pure functions, no network access."""

from __future__ import annotations

from urllib.parse import urlparse

_WEB_SCHEMES = ("http", "https")


def is_valid_url(url: object) -> bool:
    """Return ``True`` only for absolute ``http``/``https`` URLs with a host."""
    if not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url.strip())
        host = parsed.hostname
    except ValueError:
        return False
    if parsed.scheme.lower() not in _WEB_SCHEMES or not host:
        return False
    return not any(ch.isspace() for ch in host)


def extract_domain(url: str) -> str:
    """Return the hostname of *url* without a leading ``www.``.

    Falls back to *url* itself when it cannot be parsed or has no host.
    """
    try:
        host = urlparse(url).hostname
    except (ValueError, AttributeError, TypeError):
        return url
    if not host:
        return url
    if host.startswith("www."):
        host = host[len("www."):]
    return host
