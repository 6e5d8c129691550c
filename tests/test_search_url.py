from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest

from readnews.fetchers import build_search_url, normalize_query
from readnews.models import SearchRequest

FIXED_PARAMS = ("format", "section", "show-fields", "page-size", "order-by", "api-key")


def _params(url: str) -> dict:
    return parse_qs(urlsplit(url).query, keep_blank_values=True)


@pytest.mark.parametrize("query", ["federer", "  andy murray ", "tour de france"])
def test_query_param_has_spaces_removed(query):
    url = build_search_url(SearchRequest(query=query))
    assert _params(url)["q"] == [query.strip().replace(" ", "")]


@pytest.mark.parametrize("query", [None, "", "   "])
def test_empty_query_omits_q(query):
    url = build_search_url(SearchRequest(query=query))
    assert "q" not in _params(url)


@pytest.mark.parametrize("query", [None, "cricket", "a&b=c"])
def test_fixed_params_present_exactly_once(query):
    params = _params(build_search_url(SearchRequest(query=query)))
    for name in FIXED_PARAMS:
        assert len(params[name]) == 1


def test_param_values_and_order():
    request = SearchRequest(query="golf", page_size=25, order_by="oldest", section="sport", api_key="k3y")
    url = build_search_url(request, base_url="https://content.guardianapis.com/search?")
    assert url == (
        "https://content.guardianapis.com/search?q=golf&format=json&section=sport"
        "&show-fields=trailText&page-size=25&order-by=oldest&api-key=k3y"
    )


def test_special_characters_are_encoded():
    params = _params(build_search_url(SearchRequest(query="a&b=c")))
    assert params["q"] == ["a&b=c"]


def test_existing_query_on_base_is_kept():
    url = build_search_url(SearchRequest(), base_url="https://example.org/search?lang=en")
    params = _params(url)
    assert params["lang"] == ["en"]
    assert params["format"] == ["json"]


def test_invalid_preferences_are_passed_through():
    params = _params(build_search_url(SearchRequest(page_size="-1", order_by="sideways")))
    assert params["page-size"] == ["-1"]
    assert params["order-by"] == ["sideways"]


def test_normalize_query():
    assert normalize_query(" rugby union ") == "rugbyunion"
    assert normalize_query(None) == ""
