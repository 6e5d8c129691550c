from __future__ import annotations

import json
from typing import Callable, List, Optional

import pytest
import requests


class FakeResponse:
    def __init__(self, status_code: int = 200, body: str | bytes = "") -> None:
        self.status_code = status_code
        self.content = body.encode("utf-8") if isinstance(body, str) else body


def make_entry(
    title: str = "Wimbledon final preview",
    section: str = "Sport",
    trail_text: Optional[str] = "<strong>Who</strong> will win?",
    published: Optional[str] = "2017-07-14T10:23:09Z",
    url: Optional[str] = "https://www.theguardian.com/sport/2017/jul/14/wimbledon",
) -> dict:
    entry: dict = {"webTitle": title, "sectionName": section}
    if trail_text is not None:
        entry["fields"] = {"trailText": trail_text}
    if published is not None:
        entry["webPublicationDate"] = published
    if url is not None:
        entry["webUrl"] = url
    return entry


def make_body(entries: List[dict]) -> str:
    return json.dumps({"response": {"status": "ok", "total": len(entries), "results": entries}})


@pytest.fixture
def stub_get(monkeypatch) -> Callable:
    """Replace ``requests.get`` with a canned response and record the calls."""

    def install(response=None, *, exc: Exception | None = None):
        calls: list = []

        def fake_get(url, **kwargs):
            calls.append((url, kwargs))
            if exc is not None:
                raise exc
            return response

        monkeypatch.setattr(requests, "get", fake_get)
        return calls

    return install
