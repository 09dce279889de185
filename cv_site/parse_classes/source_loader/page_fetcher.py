"""page_fetcher.py

Fetches a public shared-page URL into a RawDocument.
"""

import requests

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.exceptions import SourceUnavailableError
from cv_site.models import RawDocument

REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml",
    "Accept-Language": "en-US,en;q=0.9",
}


def fetch_shared_page(
    url: str,
    timeout_seconds: float = GENERATOR_DEFAULTS.FETCH_TIMEOUT_SECONDS,
) -> RawDocument:
    """
    Download a shared page snapshot. A single attempt is made; anything past
    `timeout_seconds` counts as a failure.

    Raises:
        SourceUnavailableError: On network failure, timeout or non-2xx status.
    """
    if not url or not url.lower().startswith(("http://", "https://")):
        raise SourceUnavailableError(url, "Only http(s) URLs can be fetched.")

    try:
        response = requests.get(url, headers=REQUEST_HEADERS, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise SourceUnavailableError(url, f"Fetch failed: {e}")

    return RawDocument(
        content=response.content,
        media_kind="html-page",
        source=url,
    )
