"""Infrastructure errors – failures of the remote collection."""

from __future__ import annotations

from typing import Any

from paged_cursor.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not caused by caller input."""

    default_code = "infrastructure_error"


class TransportError(InfrastructureError):
    """The remote collection could not complete a request."""

    default_code = "transport_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code


class TransportTimeoutError(TransportError):  # noqa: A001
    """A request exceeded its deadline."""

    default_code = "transport_timeout"


class SerializationError(TransportError):
    """A response body could not be decoded."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = [
    "InfrastructureError",
    "SerializationError",
    "TransportError",
    "TransportTimeoutError",
]
