"""OperationResult[T] – uniform success/failure envelope."""

from __future__ import annotations

import dataclasses
from typing import Generic, TypeVar

from paged_cursor.kernel.errors import error_message

T = TypeVar("T")


@dataclasses.dataclass(frozen=True, slots=True)
class OperationResult(Generic[T]):
    """Outcome of a cursor operation that talks to the remote collection.

    Network-touching cursor methods never raise; they return one of these.
    ``error`` carries the human-readable message, ``exception`` the original
    error object.  ``skipped`` marks a successful call that decided no
    request was needed (an unchanged ``update``).
    """

    success: bool
    data: T | None = None
    error: str | None = None
    exception: BaseException | None = dataclasses.field(default=None, repr=False, compare=False)
    skipped: bool = False

    @classmethod
    def ok(cls, data: T | None = None, *, skipped: bool = False) -> "OperationResult[T]":
        return cls(success=True, data=data, skipped=skipped)

    @classmethod
    def fail(cls, error: BaseException | str) -> "OperationResult[T]":
        if isinstance(error, BaseException):
            return cls(success=False, error=error_message(error), exception=error)
        return cls(success=False, error=error)

    def is_ok(self) -> bool:
        return self.success

    def is_err(self) -> bool:
        return not self.success

    def unwrap(self) -> T | None:
        """Return ``data`` or raise the carried error."""
        if self.success:
            return self.data
        if self.exception is not None:
            raise self.exception
        raise RuntimeError(self.error or "operation failed")

    def unwrap_or(self, default: T) -> T | None:
        return self.data if self.success else default

    def __bool__(self) -> bool:
        return self.success


__all__ = ["OperationResult"]
