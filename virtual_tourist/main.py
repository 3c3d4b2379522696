"""Application entrypoint."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path, PurePosixPath
from typing import Sequence

import httpx
from pydantic import ValidationError

from virtual_tourist.config import get_settings
from virtual_tourist.domain.models import Album, SearchParameters
from virtual_tourist.logging import configure_logging, logger
from virtual_tourist.services.album import AlbumLoader
from virtual_tourist.services.exceptions import ConfigurationError
from virtual_tourist.services.photo_search import PhotoSearchClient


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch the Flickr photo album for a map pin.")
    parser.add_argument("latitude", type=float)
    parser.add_argument("longitude", type=float)
    parser.add_argument("--radius", type=float, default=None, help="Search radius in km (max 32).")
    parser.add_argument("--page-size", type=int, default=None)
    parser.add_argument("--output", type=Path, default=None, help="Directory to write images into.")
    return parser.parse_args(argv)


def save_album(album: Album, output: Path) -> list[Path]:
    output.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for index, photo in enumerate(album.photos):
        if not photo.download.ok or photo.download.data is None:
            continue
        suffix = PurePosixPath(photo.reference.url.path or "").suffix or ".jpg"
        target = output / f"{index:03d}{suffix}"
        target.write_bytes(photo.download.data)
        written.append(target)
    return written


async def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        params = SearchParameters(
            latitude=args.latitude,
            longitude=args.longitude,
            radius=args.radius if args.radius is not None else settings.flickr.default_radius,
            page_size=args.page_size,
        )
    except ValidationError as exc:
        logger.error("cli_invalid_arguments", error=str(exc))
        return 2

    logger.info("cli_starting", environment=settings.environment, lat=params.latitude, lon=params.longitude)
    async with httpx.AsyncClient(
        timeout=settings.request_timeout_seconds,
        follow_redirects=True,
    ) as http_client:
        try:
            client = PhotoSearchClient(http_client, settings=settings.flickr)
        except ConfigurationError as exc:
            logger.error("cli_misconfigured", error=str(exc))
            return 2
        album = await AlbumLoader(client).load(params)

    if not album.search.ok:
        error = album.search.error
        logger.error("album_unavailable", kind=error.kind.value, detail=error.detail, status=error.status_label)
        return 1

    for photo in album.photos:
        print(photo.reference.url)
    if args.output is not None:
        written = save_album(album, args.output)
        logger.info("album_saved", directory=str(args.output), files=len(written))
    return 0


def run() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    run()
