from __future__ import annotations

import json
import webbrowser
from dataclasses import asdict, dataclass
from typing import Iterable, List, Sequence

from ..models import ArticleRecord
from ..processors import display_text, trail_text_to_plain
from ..utils.logging import get_logger

logger = get_logger("readnews.output.list")

NO_INTERNET_MESSAGE = "No internet connection."
NO_RESULTS_MESSAGE = "No news articles found."


@dataclass(frozen=True, slots=True)
class ListRow:
    position: int
    title: str
    section: str
    description: str
    published_at: str
    url: str


def format_row(record: ArticleRecord, index: int) -> ListRow:
    """Build the display model for one list entry. ``position`` is 1-based."""
    return ListRow(
        position=index + 1,
        title=display_text(record.title),
        section=record.section,
        description=display_text(trail_text_to_plain(record.description)),
        published_at=record.published_at,
        url=record.url,
    )


def format_rows(records: Iterable[ArticleRecord]) -> List[ListRow]:
    return [format_row(r, i) for i, r in enumerate(records)]


def render_rows(rows: Sequence[ListRow]) -> str:
    if not rows:
        return NO_RESULTS_MESSAGE

    blocks = []
    for row in rows:
        header = f"{row.position}. {row.title}"
        meta = " | ".join(part for part in (row.section, row.published_at) if part)
        lines = [header]
        if meta:
            lines.append(f"   {meta}")
        if row.description:
            lines.append(f"   {row.description}")
        if row.url:
            lines.append(f"   {row.url}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def rows_to_json(rows: Sequence[ListRow]) -> str:
    return json.dumps([asdict(r) for r in rows], ensure_ascii=False, indent=2)


def open_article(record: ArticleRecord) -> bool:
    """Open the full article in the user's browser."""
    if not record.url:
        logger.warning("Article '%s' has no URL to open", record.title)
        return False
    logger.info("Opening %s", record.url)
    return webbrowser.open(record.url)
