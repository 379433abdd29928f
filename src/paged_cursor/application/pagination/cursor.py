"""Application pagination – PagedCursor.

A client-side window over a paginated remote collection: one page of
records is held in memory together with an index into it, and navigation
crosses page boundaries by asking the :class:`RemoteCollection` for the
neighbouring page.

Usage::

    cursor = PagedCursor(HttpRemoteCollection("/api/customers"), page_size=50)
    await cursor.load()
    record = await cursor.next()
    result = await cursor.update(record["id"], {**record, "name": "ACME"})
"""
from __future__ import annotations

import asyncio
import contextlib
import copy
import dataclasses
from collections.abc import AsyncIterator, Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from paged_cursor.application.pagination.page import Page
from paged_cursor.application.pagination.page_request import PageRequest
from paged_cursor.application.pagination.remote import RemoteCollection
from paged_cursor.application.pagination.state import (
    BusyPolicy,
    CursorState,
    Direction,
    ReconcileStrategy,
)
from paged_cursor.kernel.errors import (
    BaseError,
    CursorBusyError,
    TransportError,
    ValidationError,
    error_message,
)
from paged_cursor.kernel.types import OperationResult
from paged_cursor.observability.logging import SensitiveFieldsFilter, get_logger

if TYPE_CHECKING:
    from paged_cursor.config.settings import CursorSettings

T = TypeVar("T")

Comparator = Callable[[Any, Any], bool]

_UNSET: Any = object()
_redactor = SensitiveFieldsFilter()


def structural_equal(left: Any, right: Any) -> bool:
    """Field-by-field equality of two records.

    Mappings, dataclass instances and objects exposing ``model_dump()`` are
    reduced to plain dicts first, so key order never matters.
    """
    return _plain(left) == _plain(right)


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _plain(dataclasses.asdict(value))
    dump = getattr(value, "model_dump", None)
    if callable(dump):
        return _plain(dump())
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def _is_record(payload: Any) -> bool:
    if isinstance(payload, Mapping):
        return True
    if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
        return True
    return callable(getattr(payload, "model_dump", None))


def _missing(identity: Any) -> bool:
    return identity is None or identity == ""


def _as_transport_error(exc: Exception) -> BaseError:
    if isinstance(exc, BaseError):
        return exc
    return TransportError(error_message(exc), cause=exc)


class PagedCursor(Generic[T]):
    """Cursor over one page of a remote collection at a time.

    Network-touching methods never raise: ``load``, ``search``, ``find_by``
    and the mutations return an :class:`OperationResult`; navigation returns
    the record it lands on, or ``None`` when the move failed.  A failed
    request leaves page, index and buffer exactly as they were.
    """

    def __init__(
        self,
        collection: RemoteCollection[T],
        *,
        page_size: int = 20,
        primary_key: str = "id",
        initial_page: int = 1,
        reconcile: ReconcileStrategy | str = ReconcileStrategy.PATCH,
        busy: BusyPolicy | str = BusyPolicy.REJECT,
        comparator: Comparator | None = None,
    ) -> None:
        if collection is None:
            raise ValidationError("A remote collection is required", field="collection")
        if page_size < 1:
            raise ValidationError("page_size must be >= 1", field="page_size")
        if initial_page < 1:
            raise ValidationError("initial_page must be >= 1", field="initial_page")
        if not primary_key:
            raise ValidationError("primary_key must not be empty", field="primary_key")
        try:
            self._reconcile = ReconcileStrategy(reconcile)
            self._busy_policy = BusyPolicy(busy)
        except ValueError as exc:
            raise ValidationError(str(exc), cause=exc) from exc

        self._collection = collection
        self._primary_key = primary_key
        self._comparator: Comparator = comparator or structural_equal
        self._state: CursorState[T] = CursorState(page=initial_page, page_size=page_size)
        self._snapshot: Any = _UNSET
        self._loading = False
        self._active = False
        self._lock = asyncio.Lock()
        self._log = get_logger(__name__)

    @classmethod
    def from_settings(
        cls,
        collection: RemoteCollection[T],
        settings: "CursorSettings",
        *,
        comparator: Comparator | None = None,
    ) -> "PagedCursor[T]":
        return cls(
            collection,
            page_size=settings.page_size,
            primary_key=settings.primary_key,
            initial_page=settings.initial_page,
            reconcile=settings.reconcile_strategy,
            busy=settings.busy_policy,
            comparator=comparator,
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def collection(self) -> RemoteCollection[T]:
        return self._collection

    @property
    def state(self) -> CursorState[T]:
        return self._state

    @property
    def buffer(self) -> tuple[T, ...]:
        return self._state.buffer

    @property
    def index(self) -> int | None:
        return self._state.index

    @property
    def page(self) -> int:
        return self._state.page

    @property
    def page_size(self) -> int:
        return self._state.page_size

    @property
    def primary_key(self) -> str:
        return self._primary_key

    @property
    def total_count(self) -> int:
        return self._state.total_count

    @property
    def total_pages(self) -> int:
        return self._state.total_pages

    @property
    def has_more(self) -> bool:
        return self._state.has_more

    @property
    def search_filter(self) -> Mapping[str, Any]:
        return self._state.search_filter

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def last_direction(self) -> Direction | None:
        return self._state.last_direction

    @property
    def reconcile(self) -> ReconcileStrategy:
        return self._reconcile

    def current(self) -> T | None:
        return self._state.current

    def all(self) -> list[T]:
        return list(self._state.buffer)

    def is_changed(self, payload: Any) -> bool:
        """Whether *payload* differs from the record seen at the last positioning call."""
        if self._snapshot is _UNSET:
            return True
        return not self._comparator(self._snapshot, payload)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self, **overrides: Any) -> OperationResult[list[T]]:
        """Fetch the current page; *overrides* are extra query params for this request only."""
        async with self._guard("load") as allowed:
            if not allowed:
                return OperationResult.fail(CursorBusyError("load"))
            return await self._load(self._state.page, extra=overrides)

    async def search(
        self, filters: Mapping[str, Any] | None = None, **overrides: Any
    ) -> OperationResult[list[T]]:
        """Replace the search filter and load its first page. ``None``/``{}`` clears it."""
        async with self._guard("search") as allowed:
            if not allowed:
                return OperationResult.fail(CursorBusyError("search"))
            return await self._load(1, filters=dict(filters or {}), extra=overrides)

    async def find_by(self, field: str, value: Any) -> OperationResult[list[T]]:
        return await self.search({field: value})

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    async def next(self) -> T | None:
        async with self._guard("next") as allowed:
            if not allowed:
                return None
            state = self._commit(dataclasses.replace(self._state, last_direction=Direction.NEXT))
            if not state.buffer:
                return None
            if not state.at_buffer_end:
                self._commit(state.positioned(state.index + 1))  # type: ignore[operator]
                return self._mark()
            if not state.has_more:
                return state.current

            try:
                fresh = await self._fetch(state.page + 1)
            except Exception as exc:  # noqa: BLE001 – reported, state untouched
                self._report("next", exc, page=state.page + 1)
                return None
            if not fresh.buffer:
                # the count promised another page that is no longer there
                self._commit(dataclasses.replace(state, has_more=False))
                return state.current
            self._commit(fresh.positioned(0))
            return self._mark()

    async def prev(self) -> T | None:
        async with self._guard("prev") as allowed:
            if not allowed:
                return None
            state = self._commit(dataclasses.replace(self._state, last_direction=Direction.PREV))
            if not state.buffer:
                return None
            if not state.at_buffer_start:
                self._commit(state.positioned(state.index - 1))  # type: ignore[operator]
                return self._mark()
            if state.page <= 1:
                return state.current

            try:
                fresh = await self._fetch(state.page - 1)
            except Exception as exc:  # noqa: BLE001 – reported, state untouched
                self._report("prev", exc, page=state.page - 1)
                return None
            if not fresh.buffer:
                return state.current
            self._commit(fresh.positioned(len(fresh.buffer) - 1))
            return self._mark()

    async def first(self) -> T | None:
        async with self._guard("first") as allowed:
            if not allowed:
                return None
            return await self._goto(0)

    async def last(self) -> T | None:
        """Jump to the globally last record.

        Without a server-reported total the position of the last record is
        unknown, so the cursor moves to the end of the current window.
        """
        async with self._guard("last") as allowed:
            if not allowed:
                return None
            if not self._state.loaded and not (await self._load(self._state.page)).success:
                return None
            state = self._state
            if not state.total_known:
                if not state.buffer:
                    return None
                self._commit(state.positioned(len(state.buffer) - 1))
                return self._mark()
            return await self._goto(state.total_count - 1)

    async def goto(self, offset: int) -> T | None:
        """Position on the zero-based global *offset*, always re-fetching its page."""
        async with self._guard("goto") as allowed:
            if not allowed:
                return None
            return await self._goto(offset)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def insert(self, payload: Any) -> OperationResult[T]:
        async with self._guard("insert") as allowed:
            if not allowed:
                return OperationResult.fail(CursorBusyError("insert"))
            if not _is_record(payload):
                return OperationResult.fail(ValidationError("Invalid payload for insert", field="payload"))
            try:
                created = await self._call(self._collection.create, payload)
            except Exception as exc:  # noqa: BLE001 – collaborator failures become results
                return self._report("insert", exc)

            record = payload if created is None else created
            if self._reconcile is ReconcileStrategy.PATCH:
                state = self._state
                buffer = (*state.buffer, record)
                self._commit(
                    dataclasses.replace(state, buffer=buffer, index=len(buffer) - 1, total_count=state.total_count + 1)
                )
            else:
                await self._refresh("insert")
            return OperationResult.ok(record)

    async def update(self, id: Any, payload: Any, *, force: bool = False) -> OperationResult[T]:  # noqa: A002
        """Replace record *id*.

        Unless *force* is set, a payload for the record seen at the last
        positioning call that still equals it is not sent; the result is
        then ``skipped``.
        """
        async with self._guard("update") as allowed:
            if not allowed:
                return OperationResult.fail(CursorBusyError("update"))
            if _missing(id):
                return OperationResult.fail(ValidationError("ID is required for update", field="id"))
            if not _is_record(payload):
                return OperationResult.fail(ValidationError("Invalid payload for update", field="payload"))
            if not force and self._key_of(self._snapshot) == id and not self.is_changed(payload):
                return OperationResult.ok(skipped=True)
            try:
                replaced = await self._call(self._collection.replace, id, payload)
            except Exception as exc:  # noqa: BLE001 – collaborator failures become results
                return self._report("update", exc, id=id)

            record = payload if replaced is None else replaced
            if self._reconcile is ReconcileStrategy.PATCH:
                position = self._position_of(id)
                if position is not None:
                    buffer = list(self._state.buffer)
                    buffer[position] = record
                    self._commit(dataclasses.replace(self._state, buffer=tuple(buffer)))
            else:
                await self._refresh("update")
            if self._key_of(self.current()) == id:
                self._mark()
            return OperationResult.ok(record)

    async def delete(self, id: Any) -> OperationResult[None]:  # noqa: A002
        async with self._guard("delete") as allowed:
            if not allowed:
                return OperationResult.fail(CursorBusyError("delete"))
            if _missing(id):
                return OperationResult.fail(ValidationError("ID is required for delete", field="id"))
            try:
                await self._call(self._collection.remove, id)
            except Exception as exc:  # noqa: BLE001 – collaborator failures become results
                return self._report("delete", exc, id=id)

            if self._reconcile is ReconcileStrategy.PATCH:
                state = self._state
                state = dataclasses.replace(state, total_count=max(0, state.total_count - 1))
                position = self._position_of(id)
                if position is not None:
                    buffer = state.buffer[:position] + state.buffer[position + 1:]
                    state = dataclasses.replace(state, buffer=buffer).positioned(state.index)
                self._commit(state)
            else:
                await self._refresh("delete")
            return OperationResult.ok()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @contextlib.asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[bool]:
        if self._busy_policy is BusyPolicy.REJECT and self._active:
            self._log.warning("cursor.busy", operation=operation)
            yield False
            return
        async with self._lock:
            self._active = True
            try:
                yield True
            finally:
                self._active = False

    async def _call(self, method: Callable[..., Any], *args: Any) -> Any:
        self._loading = True
        try:
            return await method(*args)
        finally:
            self._loading = False

    async def _fetch(
        self,
        page: int,
        *,
        filters: Mapping[str, Any] | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> CursorState[T]:
        """Fetch *page* and return the state it would produce; nothing is committed."""
        state = self._state
        filters = state.search_filter if filters is None else filters
        request = PageRequest(page=page, size=state.page_size, filters=filters, extra=extra or {})
        loaded: Page[T] = Page.from_response(await self._call(self._collection.list, request), request)
        self._log.debug(
            "cursor.page_loaded",
            page=page,
            rows=len(loaded.items),
            total=loaded.total,
            search=_redactor.redact_deep(filters),
        )
        return dataclasses.replace(
            state,
            buffer=loaded.items,
            index=None,
            page=page,
            total_count=loaded.total,
            total_known=loaded.total_known,
            has_more=loaded.has_next,
            search_filter=MappingProxyType(dict(filters)),
            loaded=True,
        )

    async def _load(
        self,
        page: int,
        *,
        filters: Mapping[str, Any] | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> OperationResult[list[T]]:
        try:
            fresh = await self._fetch(page, filters=filters, extra=extra)
        except Exception as exc:  # noqa: BLE001 – collaborator failures become results
            return self._report("load", exc, page=page)
        self._commit(fresh.positioned(0))
        return OperationResult.ok(list(fresh.buffer))

    async def _goto(self, offset: int) -> T | None:
        state = self._state
        if offset < 0 or (state.total_known and offset >= state.total_count):
            self._log.debug("cursor.offset_out_of_range", offset=offset, total=state.total_count)
            return None
        page, index = PageRequest.locate(offset, state.page_size)
        try:
            fresh = await self._fetch(page)
        except Exception as exc:  # noqa: BLE001 – reported, state untouched
            self._report("goto", exc, page=page)
            return None
        if index >= len(fresh.buffer):
            self._log.warning("cursor.offset_out_of_range", offset=offset, page=page, rows=len(fresh.buffer))
            return None
        self._commit(fresh.positioned(index))
        return self._mark()

    async def _refresh(self, operation: str) -> None:
        """Re-fetch the current page after a mutation, keeping the index where possible."""
        state = self._state
        try:
            fresh = await self._fetch(state.page)
            if not fresh.buffer and fresh.page > 1:
                fresh = await self._fetch(fresh.page - 1)
                self._commit(fresh.positioned(len(fresh.buffer) - 1))
                return
        except Exception as exc:  # noqa: BLE001 – the mutation itself succeeded
            self._log.warning(
                "cursor.reload_failed", operation=operation, page=state.page, error=error_message(exc)
            )
            return
        self._commit(fresh.positioned(state.index))

    def _commit(self, state: CursorState[T]) -> CursorState[T]:
        self._state = state
        return state

    def _mark(self) -> T | None:
        """Snapshot the current record for change detection and return it."""
        current = self._state.current
        self._snapshot = copy.deepcopy(current)
        return current

    def _report(self, operation: str, exc: Exception, **context: Any) -> OperationResult[Any]:
        error = _as_transport_error(exc)
        self._log.warning(f"cursor.{operation}_failed", error=error_message(error), **context)
        return OperationResult.fail(error)

    def _key_of(self, record: Any) -> Any:
        if record is None:
            return None
        if isinstance(record, Mapping):
            return record.get(self._primary_key)
        return getattr(record, self._primary_key, None)

    def _position_of(self, identity: Any) -> int | None:
        for position, record in enumerate(self._state.buffer):
            if self._key_of(record) == identity:
                return position
        return None


__all__ = ["Comparator", "PagedCursor", "structural_equal"]
