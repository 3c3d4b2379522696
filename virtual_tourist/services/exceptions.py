"""Domain-specific exceptions."""

from __future__ import annotations

from virtual_tourist.domain.models import FetchError, FetchErrorKind


class ServiceError(Exception):
    pass


class ConfigurationError(ServiceError):
    pass


class PhotoFetchError(ServiceError):
    """Carries a classified fetch failure up to the operation boundary."""

    def __init__(
        self,
        kind: FetchErrorKind,
        detail: str,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(detail)
        self.error = FetchError(kind=kind, detail=detail, status_code=status_code)
