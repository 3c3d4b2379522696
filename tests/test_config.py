"""Settings loading from the environment."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from virtual_tourist.config import FlickrSettings, TouristSettings, get_settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("VT_FLICKR__API_KEY", raising=False)
    settings = TouristSettings(_env_file=None)

    assert settings.environment == "dev"
    assert settings.request_timeout_seconds == 30
    assert settings.flickr.api_key is None
    assert settings.flickr.host == "api.flickr.com"
    assert settings.flickr.rest_path == "/services/rest"
    assert settings.flickr.default_page_size == 21


def test_settings_read_nested_env(monkeypatch):
    monkeypatch.setenv("VT_FLICKR__API_KEY", "abc123")
    monkeypatch.setenv("VT_FLICKR__DEFAULT_RADIUS", "10")
    monkeypatch.setenv("VT_REQUEST_TIMEOUT_SECONDS", "5")

    settings = TouristSettings(_env_file=None)

    assert settings.flickr.api_key.get_secret_value() == "abc123"
    assert settings.flickr.default_radius == 10.0
    assert settings.request_timeout_seconds == 5


def test_blank_api_key_is_unset():
    assert FlickrSettings(api_key="  ").api_key is None


def test_radius_is_bounded():
    with pytest.raises(ValidationError):
        FlickrSettings(default_radius=40)


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
