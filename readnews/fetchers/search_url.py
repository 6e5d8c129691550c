from __future__ import annotations

from typing import List, Optional, Tuple
from urllib.parse import urlencode, urlsplit, urlunsplit

from ..models import SearchRequest

GUARDIAN_SEARCH_URL = "https://content.guardianapis.com/search"
DEFAULT_SHOW_FIELDS = "trailText"


def normalize_query(query: Optional[str]) -> str:
    """Trim the query and drop the spaces inside it."""
    if not query:
        return ""
    return query.strip().replace(" ", "")


def build_search_url(
    request: SearchRequest,
    *,
    base_url: str = GUARDIAN_SEARCH_URL,
    show_fields: str = DEFAULT_SHOW_FIELDS,
) -> str:
    """Compose the search URL for ``request``.

    ``q`` is only added for a non-empty query. Page size and sort order are
    passed through as given; the API reports bad values, not this function.
    """
    params: List[Tuple[str, str]] = []
    query = normalize_query(request.query)
    if query:
        params.append(("q", query))
    params.extend(
        [
            ("format", "json"),
            ("section", request.section),
            ("show-fields", show_fields),
            ("page-size", str(request.page_size)),
            ("order-by", str(request.order_by)),
            ("api-key", request.api_key),
        ]
    )

    scheme, netloc, path, existing, fragment = urlsplit(base_url)
    encoded = urlencode(params)
    full_query = f"{existing}&{encoded}" if existing else encoded
    return urlunsplit((scheme, netloc, path, full_query, fragment))
