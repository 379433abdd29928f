"""Observability – logging."""

from paged_cursor.observability.logging import JsonLoggerFactory, SensitiveFieldsFilter, get_logger

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
