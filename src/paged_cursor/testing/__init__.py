"""Testing support – in-memory remote collection and property-based strategies."""

from paged_cursor.testing.fakes import InMemoryRemoteCollection
from paged_cursor.testing.generators import page_size_strategy, record_list_strategy

__all__ = ["InMemoryRemoteCollection", "page_size_strategy", "record_list_strategy"]
