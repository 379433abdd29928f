"""Kernel – framework-agnostic building blocks."""

from paged_cursor.kernel.errors import (
    ApplicationError,
    BaseError,
    CursorBusyError,
    DomainError,
    InfrastructureError,
    SerializationError,
    TransportError,
    TransportTimeoutError,
    ValidationError,
)
from paged_cursor.kernel.types import OperationResult

__all__ = [
    "ApplicationError",
    "BaseError",
    "CursorBusyError",
    "DomainError",
    "InfrastructureError",
    "OperationResult",
    "SerializationError",
    "TransportError",
    "TransportTimeoutError",
    "ValidationError",
]
