"""Unit tests for pagination primitives – PageRequest and Page."""

from __future__ import annotations

import pytest

from paged_cursor.application.pagination import Page, PageRequest
from paged_cursor.kernel.errors import SerializationError, ValidationError


# ---------------------------------------------------------------------------
# PageRequest
# ---------------------------------------------------------------------------


class TestPageRequest:
    def test_defaults(self) -> None:
        pr = PageRequest()
        assert pr.page == 1
        assert pr.size == 20
        assert dict(pr.filters) == {}

    def test_default_mappings_are_empty_and_read_only(self) -> None:
        first, second = PageRequest(), PageRequest()
        assert dict(first.filters) == {}
        assert dict(first.extra) == {}
        assert first.to_params() == {"page": 1, "limit": 20}
        assert first == second
        with pytest.raises(TypeError):
            first.filters["group"] = "a"  # type: ignore[index]

    def test_offset(self) -> None:
        pr = PageRequest(page=3, size=10)
        assert pr.offset == 20  # (3-1)*10

    def test_limit_is_size(self) -> None:
        assert PageRequest(size=7).limit == 7

    def test_page_zero_raises(self) -> None:
        with pytest.raises(ValidationError):
            PageRequest(page=0)

    def test_size_zero_raises(self) -> None:
        with pytest.raises(ValidationError):
            PageRequest(size=0)

    def test_to_params_flattens_filters(self) -> None:
        pr = PageRequest(page=2, size=5, filters={"group": "a", "active": True})
        assert pr.to_params() == {
            "page": 2,
            "limit": 5,
            "search[group]": "a",
            "search[active]": True,
        }

    def test_to_params_includes_extra(self) -> None:
        pr = PageRequest(extra={"sort": "name"})
        assert pr.to_params()["sort"] == "name"

    def test_with_page_keeps_filters(self) -> None:
        pr = PageRequest(page=1, size=5, filters={"group": "a"}).with_page(4)
        assert pr.page == 4
        assert dict(pr.filters) == {"group": "a"}

    @pytest.mark.parametrize(
        ("offset", "size", "expected"),
        [(0, 2, (1, 0)), (1, 2, (1, 1)), (2, 2, (2, 0)), (4, 2, (3, 0)), (9, 10, (1, 9)), (10, 10, (2, 0))],
    )
    def test_locate(self, offset: int, size: int, expected: tuple[int, int]) -> None:
        assert PageRequest.locate(offset, size) == expected

    def test_locate_negative_raises(self) -> None:
        with pytest.raises(ValidationError):
            PageRequest.locate(-1, 10)


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------


class TestPage:
    def test_total_pages(self) -> None:
        page = Page(items=(1, 2), total=5, page=1, size=2)
        assert page.total_pages == 3

    def test_total_pages_exact_division(self) -> None:
        assert Page(items=(), total=20, page=1, size=10).total_pages == 2

    def test_total_pages_zero_when_empty(self) -> None:
        assert Page(items=(), total=0, page=1, size=10).total_pages == 0

    @pytest.mark.parametrize(("number", "expected"), [(1, True), (2, True), (3, False)])
    def test_has_next_from_total(self, number: int, expected: bool) -> None:
        assert Page(items=(1,), total=5, page=number, size=2).has_next is expected

    def test_has_next_heuristic_full_page(self) -> None:
        page = Page(items=(1, 2), total=2, page=1, size=2, total_known=False)
        assert page.has_next

    def test_has_next_heuristic_short_page(self) -> None:
        page = Page(items=(1,), total=1, page=1, size=2, total_known=False)
        assert not page.has_next

    def test_has_previous(self) -> None:
        assert Page(items=(), total=0, page=2, size=2).has_previous
        assert not Page(items=(), total=0, page=1, size=2).has_previous


class TestPageFromResponse:
    def test_rows_count_envelope(self) -> None:
        page = Page.from_response({"rows": [{"id": 1}], "count": 9}, PageRequest(size=1))
        assert page.items == ({"id": 1},)
        assert page.total == 9
        assert page.total_known

    def test_items_total_envelope(self) -> None:
        page = Page.from_response({"items": [{"id": 1}, {"id": 2}], "total": 2}, PageRequest(size=2))
        assert len(page.items) == 2
        assert page.total == 2
        assert not page.has_next

    def test_bare_array(self) -> None:
        page = Page.from_response([{"id": 1}, {"id": 2}], PageRequest(page=3, size=2))
        assert page.total == 2
        assert not page.total_known
        assert page.page == 3
        assert page.has_next

    def test_envelope_without_total_falls_back_to_row_count(self) -> None:
        page = Page.from_response({"items": [{"id": 1}]}, PageRequest(size=5))
        assert page.total == 1
        assert not page.total_known

    def test_none_is_empty(self) -> None:
        page = Page.from_response(None, PageRequest())
        assert page.items == ()
        assert page.total == 0

    def test_mapping_without_rows_raises(self) -> None:
        with pytest.raises(SerializationError):
            Page.from_response({"data": []}, PageRequest())

    def test_rows_must_be_array(self) -> None:
        with pytest.raises(SerializationError):
            Page.from_response({"rows": "abc", "count": 1}, PageRequest())
