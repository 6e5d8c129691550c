from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional

from .models import ArticleRecord
from .orchestrator import fetch_articles
from .utils.logging import get_logger

logger = get_logger("readnews.loader")

FetchFn = Callable[[str], List[ArticleRecord]]
FinishedCallback = Callable[[List[ArticleRecord]], None]


class SearchLoader:
    """Run searches off the caller's thread and deliver only the newest result.

    Each ``restart`` supersedes the previous one. A superseded search still
    runs to completion in the background, but its records are dropped instead
    of being handed to ``on_finished``.
    """

    def __init__(self, fetch: FetchFn = fetch_articles, *, max_workers: int = 2) -> None:
        self._fetch = fetch
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="readnews-loader")
        self._lock = threading.RLock()
        self._generation = 0

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def restart(self, request_url: str, on_finished: FinishedCallback) -> Future:
        with self._lock:
            self._generation += 1
            generation = self._generation
        logger.debug("Starting search #%d", generation)
        return self._executor.submit(self._load, generation, request_url, on_finished)

    def _load(self, generation: int, request_url: str, on_finished: FinishedCallback) -> Optional[List[ArticleRecord]]:
        try:
            articles = self._fetch(request_url)
        except Exception as exc:  # noqa: BLE001 - keep the worker alive
            logger.exception("Search #%d failed: %s", generation, exc)
            articles = []

        # Delivery runs under the lock; restart() blocks until it returns.
        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale result of search #%d", generation)
                return None
            on_finished(articles)
        return articles

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "SearchLoader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()
