"""Unit tests for testing fakes – InMemoryRemoteCollection."""

from __future__ import annotations

import asyncio

import pytest

from paged_cursor import PageRequest, RemoteCollection
from paged_cursor.kernel.errors import TransportError
from paged_cursor.testing.fakes import InMemoryRemoteCollection


def _remote(shape: str = "rows") -> InMemoryRemoteCollection:
    records = [{"id": i + 1, "group": "a" if i % 2 else "b"} for i in range(5)]
    return InMemoryRemoteCollection(records, shape=shape)  # type: ignore[arg-type]


class TestInMemoryRemoteCollection:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(_remote(), RemoteCollection)

    def test_rows_shape(self) -> None:
        body = asyncio.run(_remote().list(PageRequest(page=2, size=2)))
        assert body == {"rows": [{"id": 3, "group": "b"}, {"id": 4, "group": "a"}], "count": 5}

    def test_items_shape(self) -> None:
        body = asyncio.run(_remote("items").list(PageRequest(page=3, size=2)))
        assert body == {"items": [{"id": 5, "group": "b"}], "total": 5}

    def test_bare_shape(self) -> None:
        body = asyncio.run(_remote("bare").list(PageRequest(size=2)))
        assert [r["id"] for r in body] == [1, 2]

    def test_filters_apply_before_paging(self) -> None:
        body = asyncio.run(_remote().list(PageRequest(size=10, filters={"group": "a"})))
        assert [r["id"] for r in body["rows"]] == [2, 4]
        assert body["count"] == 2

    def test_create_assigns_next_id(self) -> None:
        remote = _remote()
        created = asyncio.run(remote.create({"group": "c"}))
        assert created == {"id": 6, "group": "c"}
        assert remote.records[-1] == created

    def test_create_keeps_given_id(self) -> None:
        assert asyncio.run(_remote().create({"id": 42}))["id"] == 42

    def test_replace(self) -> None:
        remote = _remote()
        replaced = asyncio.run(remote.replace(2, {"group": "z"}))
        assert replaced == {"group": "z", "id": 2}
        assert remote.records[1] == {"group": "z", "id": 2}

    def test_remove(self) -> None:
        remote = _remote()
        asyncio.run(remote.remove(1))
        assert [r["id"] for r in remote.records] == [2, 3, 4, 5]

    @pytest.mark.parametrize("operation", ["replace", "remove"])
    def test_unknown_id_is_404(self, operation: str) -> None:
        remote = _remote()
        args = (99, {}) if operation == "replace" else (99,)
        with pytest.raises(TransportError) as exc_info:
            asyncio.run(getattr(remote, operation)(*args))
        assert exc_info.value.status_code == 404

    def test_fail_next_raises_once(self) -> None:
        remote = _remote().fail_next("list")

        async def run() -> None:
            with pytest.raises(TransportError, match="Injected failure on list"):
                await remote.list(PageRequest())
            assert await remote.list(PageRequest())

        asyncio.run(run())

    def test_fail_next_custom_error(self) -> None:
        remote = _remote().fail_next("create", RuntimeError("boom"))
        with pytest.raises(RuntimeError):
            asyncio.run(remote.create({}))

    def test_records_are_copies(self) -> None:
        remote = _remote()
        remote.records[0]["group"] = "mutated"
        body = asyncio.run(remote.list(PageRequest(size=1)))
        body["rows"][0]["group"] = "mutated"
        assert remote.records[0]["group"] == "b"

    def test_call_log(self) -> None:
        remote = _remote()

        async def run() -> None:
            await remote.list(PageRequest())
            await remote.remove(1)

        asyncio.run(run())
        assert remote.count("list") == 1
        assert remote.calls[1] == ("remove", 1)
        remote.reset_calls()
        assert remote.calls == []
