"""Domain errors – malformed caller input."""

from __future__ import annotations

from typing import Any

from paged_cursor.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when caller input breaks a rule of the cursor."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``field`` names the offending argument when there is one.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.field is not None:
            base["field"] = self.field
        return base


__all__ = ["DomainError", "ValidationError"]
