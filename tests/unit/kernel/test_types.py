"""Unit tests for OperationResult."""

from __future__ import annotations

import pytest

from paged_cursor import OperationResult
from paged_cursor.kernel.errors import TransportError


class TestOperationResult:
    def test_ok(self) -> None:
        r = OperationResult.ok([1, 2])
        assert r.success
        assert r.is_ok()
        assert not r.is_err()
        assert r.data == [1, 2]
        assert r.error is None
        assert bool(r) is True

    def test_ok_without_data(self) -> None:
        r = OperationResult.ok()
        assert r.success
        assert r.data is None
        assert not r.skipped

    def test_ok_skipped(self) -> None:
        assert OperationResult.ok({"id": 1}, skipped=True).skipped

    def test_fail_from_message(self) -> None:
        r = OperationResult.fail("ID is required for delete")
        assert not r.success
        assert r.error == "ID is required for delete"
        assert r.exception is None
        assert bool(r) is False

    def test_fail_from_exception_keeps_both(self) -> None:
        exc = TransportError("HTTP 500 from GET /x", status_code=500)
        r = OperationResult.fail(exc)
        assert r.error == "HTTP 500 from GET /x"
        assert r.exception is exc

    def test_unwrap_ok(self) -> None:
        assert OperationResult.ok(3).unwrap() == 3

    def test_unwrap_reraises_exception(self) -> None:
        exc = TransportError("down")
        with pytest.raises(TransportError):
            OperationResult.fail(exc).unwrap()

    def test_unwrap_message_only(self) -> None:
        with pytest.raises(RuntimeError, match="Invalid payload"):
            OperationResult.fail("Invalid payload for insert").unwrap()

    def test_unwrap_or(self) -> None:
        assert OperationResult.fail("x").unwrap_or([]) == []
        assert OperationResult.ok([1]).unwrap_or([]) == [1]

    def test_equality_ignores_exception_object(self) -> None:
        assert OperationResult.fail(TransportError("a")) == OperationResult.fail(TransportError("a"))

    def test_frozen(self) -> None:
        r = OperationResult.ok()
        with pytest.raises(AttributeError):
            r.success = False  # type: ignore[misc]
