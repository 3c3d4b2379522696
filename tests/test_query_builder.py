"""URL composition tests."""

from __future__ import annotations

import httpx
import pytest

from virtual_tourist.services.query_builder import build_url


def test_build_url_encodes_every_parameter():
    url = build_url(
        "https",
        "api.flickr.com",
        "/services/rest",
        {"method": "flickr.photos.search", "text": "golden gate", "lat": "37.8199"},
    )

    assert isinstance(url, httpx.URL)
    assert url.scheme == "https"
    assert url.host == "api.flickr.com"
    assert url.path == "/services/rest"
    assert url.params["text"] == "golden gate"
    assert url.params["lat"] == "37.8199"


def test_build_url_keeps_mapping_order():
    url = build_url("https", "example.com", "/rest", {"b": "2", "a": "1", "c": "3"})

    assert list(url.params.keys()) == ["b", "a", "c"]
    assert str(url) == "https://example.com/rest?b=2&a=1&c=3"


def test_build_url_adds_leading_slash():
    url = build_url("https", "example.com", "rest", {})

    assert str(url) == "https://example.com/rest"


@pytest.mark.parametrize(
    ("scheme", "host", "path"),
    [
        ("", "api.flickr.com", "/services/rest"),
        ("https", "", "/services/rest"),
        ("https", "api.flickr.com", ""),
        ("https", "   ", "/services/rest"),
    ],
)
def test_build_url_requires_base_components(scheme, host, path):
    assert build_url(scheme, host, path, {"a": "1"}) is None


def test_build_url_rejects_non_string_values():
    with pytest.raises(TypeError):
        build_url("https", "example.com", "/rest", {"per_page": 21})


@pytest.mark.parametrize(
    ("scheme", "host", "path"),
    [
        ("https", "example.com", "/rest#section"),
        ("https", "example.com", "/rest?format=xml"),
        ("https", "exa mple.com", "/rest"),
        ("https", "example.com/extra", "/rest"),
        ("https", "user@example.com", "/rest"),
        ("ht tp", "example.com", "/rest"),
    ],
)
def test_build_url_rejects_malformed_components(scheme, host, path):
    assert build_url(scheme, host, path, {"api_key": "k", "lat": "1"}) is None


def test_build_url_query_survives_in_params():
    url = build_url("https", "example.com", "/rest", {"api_key": "k", "lat": "1"})

    assert url.fragment == ""
    assert dict(url.params) == {"api_key": "k", "lat": "1"}
