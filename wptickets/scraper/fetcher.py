"""HTTP fetcher for WordPress.org forum and plugin pages."""

from __future__ import annotations

import httpx

from wptickets.config import settings
from wptickets.scraper.models import RawPage

# The forum serves different markup (or nothing) to clients that do not look
# like a browser.
_DEFAULT_HEADERS = {
    "pragma": "no-cache",
    "cache-control": "no-cache",
    "authority": "wordpress.org",
    "accept-language": "en-US,en",
    "upgrade-insecure-requests": "1",
    "user-agent": "Mozilla/5.0 (KHTML, like Gecko) Safari/537.36",
    "accept": "text/html,application/xhtml+xml,application/xml",
}


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.HTTPError: On connection failures and timeouts.
        httpx.InvalidURL: If *url* cannot be parsed (e.g. control characters
            in the plugin slug).
    """
    with httpx.Client(
        headers=_DEFAULT_HEADERS,
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        response.raise_for_status()
        html = response.text
        status_code = response.status_code

    return RawPage(url=url, html=html, status_code=status_code)
