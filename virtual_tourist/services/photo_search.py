"""Flickr photo search client."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from virtual_tourist.config import FlickrSettings
from virtual_tourist.domain.models import (
    DownloadResult,
    FetchErrorKind,
    FetchResult,
    ImageReference,
    SearchParameters,
)
from virtual_tourist.logging import logger
from virtual_tourist.services.exceptions import ConfigurationError, PhotoFetchError
from virtual_tourist.services.query_builder import build_url


class _PhotoPage(BaseModel):
    photo: list[dict[str, Any]]


class _SearchPayload(BaseModel):
    photos: _PhotoPage


class PhotoSearchClient:
    """Single-shot photo search and image download against the Flickr REST API.

    Every call issues exactly one request through the injected transport and
    resolves to a result value; failures are reported as ``FetchError`` rather
    than raised.
    """

    def __init__(self, http_client: httpx.AsyncClient, settings: FlickrSettings | None = None) -> None:
        self._client = http_client
        self._settings = settings or FlickrSettings()
        api_key = self._settings.api_key
        if api_key is None or not api_key.get_secret_value().strip():
            raise ConfigurationError("Flickr API key is not configured.")
        self._api_key = api_key.get_secret_value()

    def search_parameters(self, params: SearchParameters) -> dict[str, str]:
        page_size = params.page_size
        if page_size is None:
            page_size = self._settings.default_page_size
        query: dict[str, Any] = {
            "api_key": self._api_key,
            "format": params.output_format,
            "nojsoncallback": 1,
            "method": self._settings.method,
            "extras": self._settings.extras,
            "per_page": page_size,
            "lat": params.latitude,
            "lon": params.longitude,
            "radius": params.radius,
        }
        return {key: str(value) for key, value in query.items()}

    async def search_images(self, params: SearchParameters) -> FetchResult:
        try:
            images = await self._search(params)
        except PhotoFetchError as exc:
            logger.warning(
                "photo_search_failed",
                kind=exc.error.kind.value,
                detail=exc.error.detail,
                status=exc.error.status_label,
                lat=params.latitude,
                lon=params.longitude,
            )
            return FetchResult.failure(exc.error)

        logger.info(
            "photo_search_completed",
            count=len(images),
            lat=params.latitude,
            lon=params.longitude,
        )
        return FetchResult.success(images)

    async def download_bytes(self, ref: ImageReference) -> DownloadResult:
        try:
            response = await self._get(str(ref.url))
        except PhotoFetchError as exc:
            logger.warning(
                "image_download_failed",
                kind=exc.error.kind.value,
                detail=exc.error.detail,
                status=exc.error.status_label,
                url=str(ref.url),
            )
            return DownloadResult.failure(exc.error)
        return DownloadResult.success(response.content)

    async def _search(self, params: SearchParameters) -> list[ImageReference]:
        url = build_url(
            self._settings.scheme,
            self._settings.host,
            self._settings.rest_path,
            self.search_parameters(params),
        )
        if url is None:
            raise PhotoFetchError(FetchErrorKind.TRANSPORT, "malformed request URL")

        response = await self._get(url)
        payload = self._decode(response)
        return self._extract_references(payload)

    async def _get(self, url: httpx.URL | str) -> httpx.Response:
        try:
            response = await self._client.get(url)
        except httpx.RequestError as exc:
            raise PhotoFetchError(FetchErrorKind.TRANSPORT, str(exc) or exc.__class__.__name__) from exc

        status_code = response.status_code
        if not 200 <= status_code <= 299:
            raise PhotoFetchError(
                FetchErrorKind.NOT_APPROVED,
                f"Received unsuccessful status code ({status_code})",
                status_code=status_code,
            )

        if not response.content:
            raise PhotoFetchError(FetchErrorKind.EMPTY_PAYLOAD, "No data received")
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> _SearchPayload:
        try:
            data = response.json()
        except ValueError as exc:
            raise PhotoFetchError(FetchErrorKind.MALFORMED_PAYLOAD, "deserialization failed") from exc
        if not isinstance(data, dict):
            raise PhotoFetchError(FetchErrorKind.MALFORMED_PAYLOAD, "deserialization failed")

        try:
            return _SearchPayload.model_validate(data)
        except ValidationError as exc:
            raise PhotoFetchError(FetchErrorKind.MALFORMED_PAYLOAD, "unexpected shape") from exc

    def _extract_references(self, payload: _SearchPayload) -> list[ImageReference]:
        extras_key = self._settings.extras
        references: list[ImageReference] = []
        for index, photo in enumerate(payload.photos.photo):
            raw_url = photo.get(extras_key)
            if not isinstance(raw_url, str):
                raise PhotoFetchError(
                    FetchErrorKind.INVALID_REFERENCE,
                    f"Photo {index} has no {extras_key} string",
                )
            try:
                references.append(ImageReference(url=raw_url))
            except ValidationError as exc:
                raise PhotoFetchError(
                    FetchErrorKind.INVALID_REFERENCE,
                    f"Photo {index} has an invalid {extras_key}: {raw_url!r}",
                ) from exc
        return references


__all__ = ["PhotoSearchClient"]
