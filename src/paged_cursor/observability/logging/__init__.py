"""Observability – structured logging helpers."""
from paged_cursor.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from paged_cursor.observability.logging.factory import JsonLoggerFactory
from paged_cursor.observability.logging.processors import RedactingProcessor, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "RedactingProcessor",
    "SensitiveFieldsFilter",
    "get_logger",
]
