"""Application – the paged cursor and its pagination primitives."""

from paged_cursor.application.pagination import (
    BusyPolicy,
    CursorState,
    Direction,
    Page,
    PageRequest,
    PagedCursor,
    ReconcileStrategy,
    RemoteCollection,
)

__all__ = [
    "BusyPolicy",
    "CursorState",
    "Direction",
    "Page",
    "PageRequest",
    "PagedCursor",
    "ReconcileStrategy",
    "RemoteCollection",
]
