"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FlickrSettings(BaseModel):
    api_key: SecretStr | None = None
    scheme: str = "https"
    host: str = "api.flickr.com"
    rest_path: str = "/services/rest"
    method: str = Field(default="flickr.photos.search", min_length=1)
    extras: str = Field(default="url_m", min_length=1)
    default_page_size: int = Field(default=21, ge=1, le=500)
    default_radius: float = Field(default=5.0, gt=0, le=32)

    @field_validator("api_key", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class TouristSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__"
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    request_timeout_seconds: int = Field(
        default=30,
        ge=1,
        le=120,
        description="Default timeout applied to the shared HTTP transport.",
    )

    flickr: FlickrSettings = Field(default_factory=FlickrSettings)


@lru_cache
def get_settings() -> TouristSettings:
    """Return cached settings instance."""

    return TouristSettings()


__all__ = [
    "FlickrSettings",
    "TouristSettings",
    "get_settings",
]
