"""Application pagination – RemoteCollection port."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

from paged_cursor.application.pagination.page_request import PageRequest

T = TypeVar("T")


@runtime_checkable
class RemoteCollection(Protocol[T]):
    """Port: CRUD access to a paginated remote collection.

    Every method may raise :class:`~paged_cursor.kernel.errors.TransportError`.
    ``list`` answers either with a bare sequence of records or with an
    envelope mapping ``{"rows"|"items": [...], "total"|"count": int}``.
    ``create`` and ``replace`` return the stored record, or ``None`` when the
    server sends no body.
    """

    async def list(self, request: PageRequest) -> Sequence[T] | Mapping[str, Any]: ...

    async def create(self, payload: Any) -> T | None: ...

    async def replace(self, id: Any, payload: Any) -> T | None: ...  # noqa: A002

    async def remove(self, id: Any) -> None: ...  # noqa: A002


__all__ = ["RemoteCollection"]
