from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlparse

import yaml

from ..fetchers.http import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT
from ..fetchers.search_url import DEFAULT_SHOW_FIELDS, GUARDIAN_SEARCH_URL
from ..models import SearchPreferences
from ..models.search import DEFAULT_API_KEY, DEFAULT_SECTION


class ConfigError(Exception):
    """Raised when the configuration file is invalid or missing required fields."""


ALLOWED_ORDER_BY = {"newest", "oldest", "relevance"}


@dataclass(slots=True)
class Settings:
    search_url: str = GUARDIAN_SEARCH_URL
    section: str = DEFAULT_SECTION
    show_fields: str = DEFAULT_SHOW_FIELDS
    api_key: str = DEFAULT_API_KEY
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    preferences: SearchPreferences = field(default_factory=SearchPreferences)


def _section(data: dict, name: str) -> dict:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' must be a mapping in the YAML configuration")
    return value


def _positive_number(value, name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"'{name}' must be a number, got {value!r}")
    if number <= 0:
        raise ConfigError(f"'{name}' must be positive, got {value!r}")
    return number


def validate_preferences(preferences: SearchPreferences) -> SearchPreferences:
    """Validate page size and sort order before they reach the URL builder."""
    try:
        page_size = int(preferences.page_size)
    except (TypeError, ValueError):
        raise ConfigError(f"'page_size' must be an integer, got {preferences.page_size!r}")
    if page_size <= 0:
        raise ConfigError(f"'page_size' must be positive, got {page_size}")
    order_by = str(preferences.order_by).strip().lower()
    if order_by not in ALLOWED_ORDER_BY:
        raise ConfigError(f"Invalid order_by '{order_by}'. Allowed: {sorted(ALLOWED_ORDER_BY)}")
    return SearchPreferences(page_size=page_size, order_by=order_by)


def load_settings(path: Path | str | None = None) -> Settings:
    """Load ``settings.yaml`` into a typed ``Settings`` instance.

    YAML structure (every key optional):
      - api: search_url (http/https URL), section, show_fields, api_key
      - http: connect_timeout, read_timeout (seconds, positive)
      - preferences: page_size (positive int), order_by ('newest'|'oldest'|'relevance')

    Without a path, defaults are used. The API key falls back to the
    ``GUARDIAN_API_KEY`` environment variable, then to the public ``test`` key.
    Unknown keys are ignored for forward compatibility.
    """
    data: dict = {}
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError("Top-level YAML value must be a mapping")

    api = _section(data, "api")
    http = _section(data, "http")
    prefs = _section(data, "preferences")

    search_url = str(api.get("search_url") or GUARDIAN_SEARCH_URL).strip()
    parsed = urlparse(search_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Invalid search_url '{search_url}'. Must be absolute http(s) URL.")
    try:
        parsed.port  # raises for out-of-range ports
    except ValueError as exc:
        raise ConfigError(f"Invalid port in search_url '{search_url}': {exc}") from exc

    try:
        defaults = SearchPreferences()
    except ValueError as exc:
        raise ConfigError(f"Invalid READNEWS_PAGE_SIZE in environment: {exc}") from exc
    preferences = validate_preferences(
        SearchPreferences(
            page_size=prefs.get("page_size", defaults.page_size),
            order_by=prefs.get("order_by", defaults.order_by),
        )
    )

    api_key = api.get("api_key") or os.environ.get("GUARDIAN_API_KEY") or DEFAULT_API_KEY

    return Settings(
        search_url=search_url,
        section=str(api.get("section") or DEFAULT_SECTION).strip(),
        show_fields=str(api.get("show_fields") or DEFAULT_SHOW_FIELDS).strip(),
        api_key=str(api_key).strip(),
        connect_timeout=_positive_number(http.get("connect_timeout", DEFAULT_CONNECT_TIMEOUT), "connect_timeout"),
        read_timeout=_positive_number(http.get("read_timeout", DEFAULT_READ_TIMEOUT), "read_timeout"),
        preferences=preferences,
    )
