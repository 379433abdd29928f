"""Testing fakes – in-memory doubles for the remote collection port."""
from paged_cursor.testing.fakes.collection import InMemoryRemoteCollection, ResponseShape

__all__ = ["InMemoryRemoteCollection", "ResponseShape"]
