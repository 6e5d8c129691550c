from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .fetchers import build_search_url, fetch_body
from .fetchers.http import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT
from .models import ArticleRecord, SearchPreferences, SearchRequest
from .processors import parse_results
from .utils.config_loader import Settings
from .utils.logging import get_logger

logger = get_logger("readnews.orchestrator")


@dataclass(slots=True)
class PipelineOutcome:
    articles: List[ArticleRecord] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)


def run_pipeline(
    request_url: str,
    *,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: float = DEFAULT_READ_TIMEOUT,
) -> PipelineOutcome:
    """Fetch ``request_url`` and parse the body, collecting diagnostics.

    A failed fetch is treated as an empty body, so the parser yields no
    records. Nothing is raised to the caller.
    """
    outcome = PipelineOutcome()
    fetched = fetch_body(request_url, connect_timeout=connect_timeout, read_timeout=read_timeout)
    if not fetched.ok:
        outcome.diagnostics.append(f"fetch failed: {fetched.error}")

    parsed = parse_results(fetched.body)
    if parsed.diagnostic:
        outcome.diagnostics.append(f"parse: {parsed.diagnostic}")
    outcome.articles = parsed.articles

    logger.info(
        "Pipeline finished: articles=%d, diagnostics=%d",
        len(outcome.articles),
        len(outcome.diagnostics),
    )
    return outcome


def fetch_articles(
    request_url: str,
    *,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: float = DEFAULT_READ_TIMEOUT,
) -> List[ArticleRecord]:
    """Return the articles for an already built search URL, or ``[]`` on any failure."""
    return run_pipeline(request_url, connect_timeout=connect_timeout, read_timeout=read_timeout).articles


class NewsSearch:
    """Stateless search service bound to a ``Settings`` instance.

    Query and preferences are passed in on every call; nothing is remembered
    between searches.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()

    def build_request(
        self,
        query: Optional[str] = None,
        preferences: Optional[SearchPreferences] = None,
    ) -> SearchRequest:
        return SearchRequest.from_preferences(
            query,
            preferences or self.settings.preferences,
            section=self.settings.section,
            api_key=self.settings.api_key,
        )

    def request_url(
        self,
        query: Optional[str] = None,
        preferences: Optional[SearchPreferences] = None,
    ) -> str:
        return build_search_url(
            self.build_request(query, preferences),
            base_url=self.settings.search_url,
            show_fields=self.settings.show_fields,
        )

    def run(self, request_url: str) -> PipelineOutcome:
        return run_pipeline(
            request_url,
            connect_timeout=self.settings.connect_timeout,
            read_timeout=self.settings.read_timeout,
        )

    def fetch(self, request_url: str) -> List[ArticleRecord]:
        return self.run(request_url).articles

    def search(
        self,
        query: Optional[str] = None,
        preferences: Optional[SearchPreferences] = None,
    ) -> List[ArticleRecord]:
        return self.run(self.request_url(query, preferences)).articles
