"""Application pagination – page primitives and the paged cursor."""
from paged_cursor.application.pagination.page_request import PageRequest
from paged_cursor.application.pagination.page import Page
from paged_cursor.application.pagination.remote import RemoteCollection
from paged_cursor.application.pagination.state import BusyPolicy, CursorState, Direction, ReconcileStrategy
from paged_cursor.application.pagination.cursor import Comparator, PagedCursor, structural_equal

__all__ = [
    "BusyPolicy",
    "Comparator",
    "CursorState",
    "Direction",
    "Page",
    "PageRequest",
    "PagedCursor",
    "ReconcileStrategy",
    "RemoteCollection",
    "structural_equal",
]
