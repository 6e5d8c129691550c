from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Literal, Optional

SortOrder = Literal["newest", "oldest", "relevance"]

DEFAULT_SECTION = "sport"
DEFAULT_API_KEY = "test"


def _env_page_size() -> int:
    return int(os.getenv("READNEWS_PAGE_SIZE", "10"))


def _env_order_by() -> str:
    return os.getenv("READNEWS_ORDER_BY", "newest")


@dataclass(slots=True)
class SearchPreferences:
    """User preferences read before every search."""

    page_size: int = field(default_factory=_env_page_size)
    order_by: str = field(default_factory=_env_order_by)


@dataclass(slots=True)
class SearchRequest:
    query: Optional[str] = None
    page_size: int | str = 10
    order_by: str = "newest"
    section: str = DEFAULT_SECTION
    api_key: str = DEFAULT_API_KEY

    @classmethod
    def from_preferences(
        cls,
        query: Optional[str],
        preferences: SearchPreferences,
        *,
        section: str = DEFAULT_SECTION,
        api_key: str = DEFAULT_API_KEY,
    ) -> "SearchRequest":
        return cls(
            query=query,
            page_size=preferences.page_size,
            order_by=preferences.order_by,
            section=section,
            api_key=api_key,
        )
