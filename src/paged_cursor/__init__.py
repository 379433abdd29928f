"""
paged_cursor – client-side cursor over a paginated remote collection.

Import path convention::

    from paged_cursor import PagedCursor, ReconcileStrategy
    from paged_cursor.adapters.http import HttpRemoteCollection
    from paged_cursor.kernel.errors import TransportError
    from paged_cursor.testing.fakes import InMemoryRemoteCollection
"""

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
from paged_cursor.kernel.types import OperationResult

__version__ = "0.1.0"
__all__ = [
    "BusyPolicy",
    "CursorState",
    "Direction",
    "OperationResult",
    "Page",
    "PageRequest",
    "PagedCursor",
    "ReconcileStrategy",
    "RemoteCollection",
    "__version__",
]
