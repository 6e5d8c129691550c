"""Response parsing and text normalization."""

from .normalize import display_text, trail_text_to_plain
from .parse import ParseResult, extract_articles, format_publication_date, parse_results

__all__ = [
    "display_text",
    "trail_text_to_plain",
    "ParseResult",
    "extract_articles",
    "format_publication_date",
    "parse_results",
]
