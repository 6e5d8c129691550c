from __future__ import annotations

import socket

from readnews.utils import connectivity


class _FakeSocket:
    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


def test_connected(monkeypatch):
    seen = []

    def fake_create_connection(address, timeout=None):
        seen.append((address, timeout))
        return _FakeSocket()

    monkeypatch.setattr(socket, "create_connection", fake_create_connection)
    assert connectivity.is_connected("https://content.guardianapis.com/search", timeout=1)
    assert seen == [(("content.guardianapis.com", 443), 1)]


def test_not_connected(monkeypatch):
    def fake_create_connection(address, timeout=None):
        raise OSError("Network is unreachable")

    monkeypatch.setattr(socket, "create_connection", fake_create_connection)
    assert not connectivity.is_connected("http://example.org")


def test_url_without_host():
    assert not connectivity.is_connected("not a url")


def test_out_of_range_port_is_not_connected(monkeypatch):
    def fake_create_connection(address, timeout=None):
        raise AssertionError("no connection should be attempted")

    monkeypatch.setattr(socket, "create_connection", fake_create_connection)
    assert not connectivity.is_connected("https://content.guardianapis.com:99999/search")
