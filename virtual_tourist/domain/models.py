"""Value types exchanged between the photo client and its callers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class SearchParameters(BaseModel):
    """Where to look for photos and how many to return."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    radius: float = Field(gt=0, le=32)
    page_size: int | None = Field(default=None, ge=1, le=500)
    output_format: Literal["json"] = "json"


class ImageReference(BaseModel):
    """Absolute URL of a retrievable image."""

    model_config = ConfigDict(frozen=True)

    url: HttpUrl


class FetchErrorKind(str, Enum):
    TRANSPORT = "transport"
    NOT_APPROVED = "not_approved"
    EMPTY_PAYLOAD = "empty_payload"
    MALFORMED_PAYLOAD = "malformed_payload"
    INVALID_REFERENCE = "invalid_reference"


@dataclass(slots=True, frozen=True)
class FetchError:
    kind: FetchErrorKind
    detail: str
    status_code: int | None = None

    @property
    def status_label(self) -> str:
        return str(self.status_code) if self.status_code is not None else "unknown"


@dataclass(slots=True, frozen=True)
class FetchResult:
    """Either one page of image references or the error that stopped it."""

    images: tuple[ImageReference, ...] = ()
    error: FetchError | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.images:
            raise ValueError("FetchResult cannot carry both images and an error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, images: list[ImageReference] | tuple[ImageReference, ...]) -> FetchResult:
        return cls(images=tuple(images))

    @classmethod
    def failure(cls, error: FetchError) -> FetchResult:
        return cls(error=error)


@dataclass(slots=True, frozen=True)
class DownloadResult:
    data: bytes | None = None
    error: FetchError | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.data is not None:
            raise ValueError("DownloadResult cannot carry both data and an error")
        if self.error is None and self.data is None:
            raise ValueError("DownloadResult needs either data or an error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: bytes) -> DownloadResult:
        return cls(data=data)

    @classmethod
    def failure(cls, error: FetchError) -> DownloadResult:
        return cls(error=error)


@dataclass(slots=True, frozen=True)
class AlbumPhoto:
    reference: ImageReference
    download: DownloadResult


@dataclass(slots=True, frozen=True)
class Album:
    search: FetchResult
    photos: tuple[AlbumPhoto, ...] = ()

    @property
    def downloaded(self) -> int:
        return sum(1 for photo in self.photos if photo.download.ok)


__all__ = [
    "Album",
    "AlbumPhoto",
    "DownloadResult",
    "FetchError",
    "FetchErrorKind",
    "FetchResult",
    "ImageReference",
    "SearchParameters",
]
