from __future__ import annotations

import json
from urllib.parse import parse_qs, urlsplit

import pytest

from readnews import main as cli
from readnews.output import NO_INTERNET_MESSAGE, NO_RESULTS_MESSAGE
from tests.conftest import FakeResponse, make_body, make_entry


@pytest.fixture(autouse=True)
def quiet_cli(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli, "is_connected", lambda url: True)
    monkeypatch.delenv("GUARDIAN_API_KEY", raising=False)


def test_offline_skips_search(monkeypatch, stub_get, capsys):
    calls = stub_get(FakeResponse(200, make_body([make_entry()])))
    monkeypatch.setattr(cli, "is_connected", lambda url: False)
    assert cli.main(["tennis"]) == cli.EXIT_OFFLINE
    assert capsys.readouterr().out.strip() == NO_INTERNET_MESSAGE
    assert calls == []


def test_prints_articles(stub_get, capsys):
    calls = stub_get(FakeResponse(200, make_body([make_entry(title="First"), make_entry(title="Second")])))
    assert cli.main(["andy", "murray", "--page-size", "2", "--order-by", "oldest"]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert out.index("1. First") < out.index("2. Second")
    params = parse_qs(urlsplit(calls[0][0]).query)
    assert params["q"] == ["andymurray"]
    assert params["page-size"] == ["2"]
    assert params["order-by"] == ["oldest"]


def test_no_results_message_on_failure(stub_get, capsys):
    stub_get(FakeResponse(503, ""))
    assert cli.main([]) == cli.EXIT_OK
    assert capsys.readouterr().out.strip() == NO_RESULTS_MESSAGE


def test_json_output(stub_get, capsys):
    stub_get(FakeResponse(200, make_body([make_entry(title="Only")])))
    assert cli.main(["--json"]) == cli.EXIT_OK
    data = json.loads(capsys.readouterr().out)
    assert [row["title"] for row in data] == ["Only"]


def test_config_error(tmp_path, capsys):
    assert cli.main(["--config", str(tmp_path / "missing.yaml")]) == cli.EXIT_CONFIG_ERROR
    assert "Configuration error" in capsys.readouterr().err


def test_invalid_page_size_flag(capsys):
    assert cli.main(["--page-size", "0"]) == cli.EXIT_CONFIG_ERROR


def test_open_selected_article(monkeypatch, stub_get):
    stub_get(FakeResponse(200, make_body([make_entry(url="https://a"), make_entry(url="https://b")])))
    opened = []
    monkeypatch.setattr(cli, "open_article", lambda record: opened.append(record.url))
    cli.main(["--open", "2"])
    cli.main(["--open", "5"])
    assert opened == ["https://b"]


def test_out_of_range_port_is_config_error(tmp_path, capsys):
    path = tmp_path / "settings.yaml"
    path.write_text("api:\n  search_url: https://content.guardianapis.com:99999/search\n", encoding="utf-8")
    assert cli.main(["--config", str(path)]) == cli.EXIT_CONFIG_ERROR
    assert "Invalid port" in capsys.readouterr().err


def test_search_runs_through_background_loader(monkeypatch, stub_get, capsys):
    stub_get(FakeResponse(200, make_body([make_entry(title="Loaded")])))
    started = []

    class RecordingLoader(cli.SearchLoader):
        def restart(self, request_url, on_finished):
            started.append(request_url)
            return super().restart(request_url, on_finished)

    monkeypatch.setattr(cli, "SearchLoader", RecordingLoader)
    assert cli.main(["cricket"]) == cli.EXIT_OK
    assert len(started) == 1
    assert parse_qs(urlsplit(started[0]).query)["q"] == ["cricket"]
    assert "1. Loaded" in capsys.readouterr().out
