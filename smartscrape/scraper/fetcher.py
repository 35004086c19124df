"""Relay fetcher: retrieves raw HTML through an ordered chain of CORS relays.

Relay priority (highest to lowest):
  1. AllOrigins
  2. CORSProxy.io
  3. CodeTabs

Each relay is tried exactly once, in order, and the first plausible HTML body
wins.  A relay fails on timeout, transport error, non-2xx status, a body
shorter than ``settings.min_html_length``, or a body that carries a
CAPTCHA/bot-block marker.  When every relay fails a single
:class:`RelayExhaustedError` enumerates each relay's reason.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from urllib.parse import quote

import httpx

from smartscrape.config import settings
from smartscrape.scraper.errors import RelayExhaustedError
from smartscrape.scraper.models import RelayFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Relay:
    """A third-party service that fetches a URL server-side.

    ``template`` contains a single ``{url}`` placeholder that receives the
    fully percent-encoded target URL.
    """

    name: str
    template: str
    enabled: bool = True

    def wrap(self, url: str) -> str:
        return self.template.format(url=quote(url, safe=""))


# ---------------------------------------------------------------------------
# Relay table (tried in order)
# ---------------------------------------------------------------------------
DEFAULT_RELAYS: tuple = (
    Relay("AllOrigins", "https://api.allorigins.win/raw?url={url}"),
    Relay("CORSProxy.io", "https://corsproxy.io/?{url}"),
    Relay("CodeTabs", "https://api.codetabs.com/v1/proxy?quest={url}"),
)


def active_relays(names: Optional[Sequence[str]] = None) -> List[Relay]:
    """Return the relays to try, in order.

    With no *names* (and an empty ``settings.relays``) every enabled relay in
    :data:`DEFAULT_RELAYS` is returned.  Otherwise the named relays are
    returned in the order given; names match case-insensitively.

    Raises:
        ValueError: If a name does not match any relay in the table.
    """
    names = list(names if names is not None else settings.relays)
    if not names:
        return [r for r in DEFAULT_RELAYS if r.enabled]

    by_name = {r.name.lower(): r for r in DEFAULT_RELAYS}
    selected: List[Relay] = []
    for name in names:
        relay = by_name.get(name.strip().lower())
        if relay is None:
            known = ", ".join(r.name for r in DEFAULT_RELAYS)
            raise ValueError(f"Unknown relay {name!r} (known: {known})")
        selected.append(relay)
    return selected


def _rejection_reason(body: str) -> Optional[str]:
    """Return why *body* is not usable article HTML, or ``None`` if it is."""
    if len(body) < settings.min_html_length:
        return f"response too short ({len(body)} chars)"
    lowered = body.lower()
    for marker in settings.block_markers:
        if marker.lower() in lowered:
            return f"blocked page detected ({marker!r})"
    return None


def _timed_out(relay: Relay) -> RelayFailure:
    return RelayFailure(relay.name, "timeout", f"timed out after {settings.relay_timeout:g}s")


def _read_text(response: httpx.Response, deadline: float) -> Optional[str]:
    """Read *response* as text, or return ``None`` once *deadline* has passed.

    The deadline is checked between reads, so a relay that keeps the socket
    busy by trickling bytes is still cut off.
    """
    parts: List[str] = []
    for part in response.iter_text():
        if time.monotonic() > deadline:
            return None
        parts.append(part)
    if time.monotonic() > deadline:
        return None
    return "".join(parts)


def _try_relay(client: httpx.Client, relay: Relay, url: str) -> Tuple[Optional[str], Optional[RelayFailure]]:
    """Make one attempt through *relay*; returns ``(html, None)`` or ``(None, failure)``.

    The whole attempt, body included, is bounded by ``settings.relay_timeout``.
    """
    deadline = time.monotonic() + settings.relay_timeout
    try:
        with client.stream("GET", relay.wrap(url)) as response:
            if not response.is_success:
                return None, RelayFailure(relay.name, "http_status", f"HTTP {response.status_code}")
            html = _read_text(response, deadline)
    except httpx.TimeoutException:
        return None, _timed_out(relay)
    except httpx.HTTPError as exc:
        return None, RelayFailure(relay.name, "network", f"network error: {exc}")

    if html is None:
        return None, _timed_out(relay)

    reason = _rejection_reason(html)
    if reason is not None:
        return None, RelayFailure(relay.name, "rejected", reason)
    return html, None


def fetch_html(url: str, relays: Optional[Sequence[Relay]] = None) -> str:
    """Fetch *url* through the relay chain and return the raw HTML body.

    Args:
        url: A URL that already passed :func:`~smartscrape.scraper.urls.is_valid_url`.
        relays: Relays to try in order; defaults to :func:`active_relays`.

    Raises:
        RelayExhaustedError: If no relay produced usable HTML.
    """
    chain = list(relays) if relays is not None else active_relays()
    failures: List[RelayFailure] = []

    with httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.relay_timeout,
        follow_redirects=True,
    ) as client:
        for relay in chain:
            logger.info("Trying relay %s for %s", relay.name, url)
            html, failure = _try_relay(client, relay, url)
            if html is not None:
                logger.info("Relay %s returned %d chars", relay.name, len(html))
                return html
            logger.warning("Relay %s failed: %s", relay.name, failure.reason)
            failures.append(failure)

    error = RelayExhaustedError(failures)
    logger.error("%s", error.message)
    raise error
