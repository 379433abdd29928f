"""Application pagination – Page."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from paged_cursor.application.pagination.page_request import PageRequest
from paged_cursor.kernel.errors import SerializationError

T = TypeVar("T")

_ROW_KEYS = ("rows", "items")
_TOTAL_KEYS = ("total", "count")


@dataclasses.dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a remote listing with computed navigation properties.

    ``total_known`` is false when the server answered with a bare array; in
    that case ``total`` is only the number of rows received and ``has_next``
    falls back to "the page came back full".
    """

    items: tuple[T, ...]
    total: int
    page: int
    size: int
    total_known: bool = True

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        if self.total_known:
            return self.total > self.page * self.size
        return len(self.items) >= self.size

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @classmethod
    def from_response(cls, payload: Any, request: PageRequest) -> "Page[T]":
        """Normalise a list response: a bare array or a ``{rows|items, total|count}`` envelope."""
        if payload is None:
            return cls(items=(), total=0, page=request.page, size=request.size, total_known=False)
        if isinstance(payload, Mapping):
            rows = next((payload[k] for k in _ROW_KEYS if payload.get(k) is not None), None)
            if rows is None:
                raise SerializationError(
                    "List response carries neither 'rows' nor 'items'",
                    payload_type=type(payload).__name__,
                )
            items = tuple(_as_rows(rows))
            total = next((payload[k] for k in _TOTAL_KEYS if payload.get(k) is not None), None)
            if total is None:
                return cls(items=items, total=len(items), page=request.page, size=request.size, total_known=False)
            return cls(items=items, total=int(total), page=request.page, size=request.size)
        items = tuple(_as_rows(payload))
        return cls(items=items, total=len(items), page=request.page, size=request.size, total_known=False)


def _as_rows(rows: Any) -> Sequence[Any]:
    if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
        raise SerializationError(
            "List response rows must be an array",
            payload_type=type(rows).__name__,
        )
    return rows


__all__ = ["Page"]
