from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlparse

import requests

from ..utils.logging import get_logger

logger = get_logger("readnews.fetchers.http")

DEFAULT_CONNECT_TIMEOUT = 15.0
DEFAULT_READ_TIMEOUT = 10.0
RESPONSE_CODE_SUCCESS = 200


@dataclass(slots=True)
class FetchResult:
    body: str = ""
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


_DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": "readnews/0.1 (+https://open-platform.theguardian.com/)",
    "Accept": "application/json",
}


def _validated_url(url: str) -> str:
    parsed = urlparse(url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid URL for HTTP fetch: {url!r}")
    return url


def fetch_body(
    url: str,
    *,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: float = DEFAULT_READ_TIMEOUT,
) -> FetchResult:
    """Perform a single GET and return the body as text.

    Never raises for transport problems. Malformed URLs, non-200 responses and
    ``requests`` errors are logged and returned as a failed ``FetchResult``.
    There are no retries.
    """
    try:
        url = _validated_url(url)
    except ValueError as exc:
        logger.error("Error creating URL: %s", exc)
        return FetchResult(error=str(exc))

    logger.debug("Fetching search results from %s", url)
    try:
        resp = requests.get(url, headers=_DEFAULT_HEADERS, timeout=(connect_timeout, read_timeout))
    except requests.RequestException as exc:
        logger.error("Problem retrieving the article JSON results: %s", exc)
        return FetchResult(error=f"{type(exc).__name__}: {exc}")

    if resp.status_code != RESPONSE_CODE_SUCCESS:
        logger.error("Error response code: %s", resp.status_code)
        return FetchResult(status_code=resp.status_code, error=f"HTTP {resp.status_code}")

    body = resp.content.decode("utf-8", errors="replace")
    logger.debug("Fetched %d characters from %s", len(body), url)
    return FetchResult(body=body, status_code=resp.status_code)
