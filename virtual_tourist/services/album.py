"""Load a pin's photo album: one search, then one download per photo."""

from __future__ import annotations

import asyncio

from virtual_tourist.domain.models import Album, AlbumPhoto, ImageReference, SearchParameters
from virtual_tourist.logging import logger
from virtual_tourist.services.photo_search import PhotoSearchClient


class AlbumLoader:
    def __init__(self, client: PhotoSearchClient) -> None:
        self._client = client

    async def load(self, params: SearchParameters) -> Album:
        search = await self._client.search_images(params)
        if not search.ok:
            return Album(search=search)

        photos = await asyncio.gather(*(self._download(ref) for ref in search.images))
        album = Album(search=search, photos=tuple(photos))
        logger.info(
            "album_loaded",
            photos=len(album.photos),
            downloaded=album.downloaded,
        )
        return album

    async def _download(self, ref: ImageReference) -> AlbumPhoto:
        return AlbumPhoto(reference=ref, download=await self._client.download_bytes(ref))


__all__ = ["AlbumLoader"]
