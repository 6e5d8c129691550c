"""Command line entrypoint for readnews.

This script runs the high-level flow:
1) load configuration and preferences
2) check connectivity
3) search the Guardian API and print the article list
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .loader import SearchLoader
from .models import ArticleRecord, SearchPreferences
from .orchestrator import NewsSearch
from .output import (
    NO_INTERNET_MESSAGE,
    NO_RESULTS_MESSAGE,
    format_rows,
    open_article,
    render_rows,
    rows_to_json,
)
from .utils.config_loader import ALLOWED_ORDER_BY, ConfigError, load_settings, validate_preferences
from .utils.connectivity import is_connected
from .utils.logging import configure_logging, get_logger

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_OFFLINE = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search Guardian news articles from the terminal")
    parser.add_argument(
        "query",
        nargs="*",
        help="Free-text search; spaces are removed before the request is sent",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings file (YAML); built-in defaults are used when omitted",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Maximum number of articles to request",
    )
    parser.add_argument(
        "--order-by",
        default=None,
        choices=sorted(ALLOWED_ORDER_BY),
        help="Sort order requested from the API",
    )
    parser.add_argument(
        "--section",
        default=None,
        help="Override the section filter from the settings",
    )
    parser.add_argument(
        "--open",
        type=int,
        default=None,
        metavar="N",
        help="Open the N-th article of the result list in a browser",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result list as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("readnews.cli")

    try:
        settings = load_settings(args.config)
        if args.page_size is not None or args.order_by is not None:
            settings.preferences = validate_preferences(
                SearchPreferences(
                    page_size=args.page_size if args.page_size is not None else settings.preferences.page_size,
                    order_by=args.order_by or settings.preferences.order_by,
                )
            )
    except ConfigError as exc:
        logger.error("Failed to load configuration: %s", exc)
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    if args.section:
        settings.section = args.section.strip()

    if not is_connected(settings.search_url):
        print(NO_INTERNET_MESSAGE)
        return EXIT_OFFLINE

    query = " ".join(args.query)
    search = NewsSearch(settings)
    delivered: List[List[ArticleRecord]] = []
    with SearchLoader(search.fetch) as loader:
        loader.restart(search.request_url(query), delivered.append).result()
    articles = delivered[-1] if delivered else []
    rows = format_rows(articles)

    if args.json:
        print(rows_to_json(rows))
    elif rows:
        print(render_rows(rows))
    else:
        print(NO_RESULTS_MESSAGE)

    if args.open is not None:
        if 1 <= args.open <= len(articles):
            open_article(articles[args.open - 1])
        else:
            logger.warning("No article at position %s (have %d)", args.open, len(articles))
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
