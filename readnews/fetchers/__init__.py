"""Request building and HTTP retrieval for the Guardian search API."""

from .http import FetchResult, fetch_body
from .search_url import GUARDIAN_SEARCH_URL, build_search_url, normalize_query

__all__ = ["FetchResult", "fetch_body", "GUARDIAN_SEARCH_URL", "build_search_url", "normalize_query"]
