from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..models import ArticleRecord
from ..utils.logging import get_logger

logger = get_logger("readnews.processors.parse")

NO_RESULTS_DIAGNOSTIC = "No results found"


@dataclass(slots=True)
class ParseResult:
    articles: List[ArticleRecord] = field(default_factory=list)
    diagnostic: Optional[str] = None


def format_publication_date(value: str) -> str:
    """Turn ``2017-07-14T10:23:09Z`` into ``2017-07-14 10:23``."""
    if not value:
        return ""
    value = value.replace("T", " ").replace("Z", "")
    return value[:-3]


def _text(obj: dict, key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _entry_to_record(entry: dict) -> ArticleRecord:
    fields = entry.get("fields")
    description = _text(fields, "trailText") if isinstance(fields, dict) else ""
    return ArticleRecord(
        title=_text(entry, "webTitle"),
        section=_text(entry, "sectionName"),
        description=description,
        published_at=format_publication_date(_text(entry, "webPublicationDate")),
        url=_text(entry, "webUrl"),
    )


def _failure(message: str) -> ParseResult:
    logger.error("Problem parsing the article JSON results: %s", message)
    return ParseResult(diagnostic=message)


def parse_results(body: Optional[str]) -> ParseResult:
    """Parse a search response body into article records.

    Expected shape::

        {"response": {"results": [{"webTitle": ..., "sectionName": ...,
                                   "fields": {"trailText": ...},
                                   "webPublicationDate": ..., "webUrl": ...}]}}

    Blank input yields an empty result without a diagnostic. Anything that is
    not the expected document yields an empty result with a diagnostic; this
    function never raises for bad input. Records keep the order of the
    ``results`` array.
    """
    if not body or not body.strip():
        return ParseResult()

    try:
        document: Any = json.loads(body)
    except (ValueError, RecursionError) as exc:
        return _failure(f"invalid JSON ({type(exc).__name__}: {exc})")

    if not isinstance(document, dict):
        return _failure("top-level value is not an object")
    response = document.get("response")
    if not isinstance(response, dict):
        return _failure("missing 'response' object")

    if "results" not in response:
        logger.debug(NO_RESULTS_DIAGNOSTIC)
        return ParseResult(diagnostic=NO_RESULTS_DIAGNOSTIC)
    results = response["results"]
    if not isinstance(results, list):
        return _failure("'results' is not an array")

    articles: List[ArticleRecord] = []
    for index, entry in enumerate(results):
        if not isinstance(entry, dict):
            logger.warning("Result %d is %s, not an object; using empty fields", index, type(entry).__name__)
            entry = {}
        articles.append(_entry_to_record(entry))

    logger.info("Parsed %d article(s)", len(articles))
    return ParseResult(articles=articles)


def extract_articles(body: Optional[str]) -> List[ArticleRecord]:
    return parse_results(body).articles
