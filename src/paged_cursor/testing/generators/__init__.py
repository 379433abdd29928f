"""Testing generators – Hypothesis strategies for collections and page sizes."""
from paged_cursor.testing.generators.strategies import page_size_strategy, record_list_strategy

__all__ = ["page_size_strategy", "record_list_strategy"]
