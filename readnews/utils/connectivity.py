from __future__ import annotations

import socket
from urllib.parse import urlparse

from .logging import get_logger

logger = get_logger("readnews.utils.connectivity")


def is_connected(url: str, *, timeout: float = 3.0) -> bool:
    """Return True when a TCP connection to the host of ``url`` can be opened.

    This is the pre-flight check run before a search; the search itself is
    skipped when it fails.
    """
    parsed = urlparse(url)
    host = parsed.hostname
    if not host:
        return False
    try:
        port = parsed.port or (443 if parsed.scheme == "https" else 80)
    except ValueError as exc:
        logger.warning("Invalid port in %s: %s", url, exc)
        return False
    try:
        with socket.create_connection((host, port), timeout=timeout):
            return True
    except OSError as exc:
        logger.info("No connection to %s:%s (%s)", host, port, exc)
        return False
