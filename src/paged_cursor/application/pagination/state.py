"""Application pagination – CursorState and cursor option enums."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ReconcileStrategy(str, Enum):
    """How the window follows a successful insert/update/delete."""
    PATCH = "patch"
    RELOAD = "reload"


class BusyPolicy(str, Enum):
    """What happens to a call made while a request is in flight."""
    REJECT = "reject"
    QUEUE = "queue"


class Direction(str, Enum):
    NEXT = "next"
    PREV = "prev"


@dataclasses.dataclass(frozen=True)
class CursorState(Generic[T]):
    """Immutable snapshot of a cursor's window.

    ``index`` is ``None`` exactly when ``buffer`` is empty.  ``total_known``
    records whether the last load got a server-reported total.
    """

    buffer: tuple[T, ...] = ()
    index: int | None = None
    page: int = 1
    page_size: int = 20
    total_count: int = 0
    total_known: bool = False
    has_more: bool = False
    search_filter: Mapping[str, Any] = dataclasses.field(default_factory=lambda: MappingProxyType({}))
    loaded: bool = False
    last_direction: Direction | None = None

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0 or self.total_count <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def current(self) -> T | None:
        if self.index is None or not 0 <= self.index < len(self.buffer):
            return None
        return self.buffer[self.index]

    @property
    def at_buffer_end(self) -> bool:
        return self.index is None or self.index >= len(self.buffer) - 1

    @property
    def at_buffer_start(self) -> bool:
        return self.index is None or self.index <= 0

    def positioned(self, index: int | None) -> "CursorState[T]":
        """Copy with *index* clamped into the buffer (``None`` when empty)."""
        if not self.buffer:
            return dataclasses.replace(self, index=None)
        if index is None:
            index = 0
        return dataclasses.replace(self, index=max(0, min(index, len(self.buffer) - 1)))

    def to_dict(self) -> dict[str, Any]:
        """Plain summary of the window, suitable for logging."""
        return {
            "records": len(self.buffer),
            "index": self.index,
            "page": self.page,
            "count": self.total_count,
            "count_pages": self.total_pages,
            "has_more": self.has_more,
            "search": dict(self.search_filter),
        }


__all__ = ["BusyPolicy", "CursorState", "Direction", "ReconcileStrategy"]
