"""Config settings – CursorSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from paged_cursor.application.pagination.state import BusyPolicy, ReconcileStrategy
from paged_cursor.config.settings.base import Settings
from paged_cursor.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class CursorSettings(Settings):
    """Construction options of a :class:`~paged_cursor.PagedCursor`.

    Environment variables: ``PAGED_CURSOR_PAGE_SIZE``, ``PAGED_CURSOR_PRIMARY_KEY``,
    ``PAGED_CURSOR_INITIAL_PAGE``, ``PAGED_CURSOR_RECONCILE``, ``PAGED_CURSOR_BUSY``.
    """

    _prefix: ClassVar[str] = "PAGED_CURSOR"

    page_size: int = 20
    primary_key: str = "id"
    initial_page: int = 1
    reconcile: str = ReconcileStrategy.PATCH.value
    busy: str = BusyPolicy.REJECT.value

    def _validate(self) -> None:
        if self.page_size < 1:
            raise InvalidSettingValueError("page_size", self.page_size, "must be >= 1")
        if self.initial_page < 1:
            raise InvalidSettingValueError("initial_page", self.initial_page, "must be >= 1")
        if not self.primary_key:
            raise InvalidSettingValueError("primary_key", self.primary_key, "must not be empty")
        allowed = {s.value for s in ReconcileStrategy}
        if self.reconcile not in allowed:
            raise InvalidSettingValueError("reconcile", self.reconcile, f"expected one of {sorted(allowed)}")
        allowed = {p.value for p in BusyPolicy}
        if self.busy not in allowed:
            raise InvalidSettingValueError("busy", self.busy, f"expected one of {sorted(allowed)}")

    @property
    def reconcile_strategy(self) -> ReconcileStrategy:
        return ReconcileStrategy(self.reconcile)

    @property
    def busy_policy(self) -> BusyPolicy:
        return BusyPolicy(self.busy)


__all__ = ["CursorSettings"]
