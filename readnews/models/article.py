from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ArticleRecord:
    """One normalized news search result.

    Every field is a plain string and defaults to ``""`` so rendering code
    never has to deal with missing values. ``description`` may contain raw
    markup.
    """

    title: str = ""
    section: str = ""
    description: str = ""
    published_at: str = ""
    url: str = ""
