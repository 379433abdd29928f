"""Application-layer errors – misuse of a cursor instance."""

from __future__ import annotations

from paged_cursor.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class CursorBusyError(ApplicationError):
    """A call arrived while the cursor was waiting on the remote collection."""

    default_code = "cursor_busy"

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Cursor is busy: '{operation}' rejected while a request is in flight",
            detail={"operation": operation},
        )
        self.operation = operation


__all__ = ["ApplicationError", "CursorBusyError"]
