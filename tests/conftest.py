"""Shared pytest fixtures for the photo client tests."""

from __future__ import annotations

import pytest
from pydantic import SecretStr

from virtual_tourist.config import FlickrSettings
from virtual_tourist.domain.models import SearchParameters


@pytest.fixture
def flickr_settings() -> FlickrSettings:
    return FlickrSettings(api_key=SecretStr("test-key"))


@pytest.fixture
def search_params() -> SearchParameters:
    return SearchParameters(latitude=52.52, longitude=13.405, radius=5.0)

