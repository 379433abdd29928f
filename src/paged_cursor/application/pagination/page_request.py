"""Application pagination – PageRequest."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from paged_cursor.kernel.errors import ValidationError


def _empty() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters sent to a remote collection.

    ``filters`` is the search mapping (field to scalar value); ``extra``
    holds one-off query parameters that apply to a single request only.
    """
    page: int = 1
    size: int = 20
    filters: Mapping[str, Any] = dataclasses.field(default_factory=_empty)
    extra: Mapping[str, Any] = dataclasses.field(default_factory=_empty)

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError("page must be >= 1", field="page")
        if self.size < 1:
            raise ValidationError("size must be >= 1", field="size")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size

    def with_page(self, page: int) -> "PageRequest":
        return dataclasses.replace(self, page=page)

    def to_params(self) -> dict[str, Any]:
        """Flatten to query parameters: ``page``, ``limit``, ``search[<field>]`` and extras."""
        params: dict[str, Any] = {"page": self.page, "limit": self.size}
        for field, value in self.filters.items():
            params[f"search[{field}]"] = value
        params.update(self.extra)
        return params

    @staticmethod
    def locate(offset: int, size: int) -> tuple[int, int]:
        """Return ``(page, index)`` holding the zero-based global *offset*."""
        if offset < 0:
            raise ValidationError("offset must be >= 0", field="offset")
        return offset // size + 1, offset % size


__all__ = ["PageRequest"]
