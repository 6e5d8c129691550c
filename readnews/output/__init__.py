"""Presentation helpers for turning article records into list rows."""

from .list_formatter import (
    NO_INTERNET_MESSAGE,
    NO_RESULTS_MESSAGE,
    ListRow,
    format_row,
    format_rows,
    open_article,
    render_rows,
    rows_to_json,
)

__all__ = [
    "NO_INTERNET_MESSAGE",
    "NO_RESULTS_MESSAGE",
    "ListRow",
    "format_row",
    "format_rows",
    "open_article",
    "render_rows",
    "rows_to_json",
]
