"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    ├── ApplicationError         (application.py)
    │   └── CursorBusyError
    └── InfrastructureError      (infrastructure.py)
        └── TransportError
            ├── TransportTimeoutError
            └── SerializationError
"""

from paged_cursor.kernel.errors.application import ApplicationError, CursorBusyError
from paged_cursor.kernel.errors.base import BaseError, error_message
from paged_cursor.kernel.errors.domain import DomainError, ValidationError
from paged_cursor.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
    TransportError,
    TransportTimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CursorBusyError",
    "DomainError",
    "InfrastructureError",
    "SerializationError",
    "TransportError",
    "TransportTimeoutError",
    "ValidationError",
    "error_message",
]
