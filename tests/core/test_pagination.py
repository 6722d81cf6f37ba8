"""
Test suite for the page builder.

Covers page count, clamping of out-of-range page numbers, navigation
flags and complete coverage of the sequence across pages.

System role: Verification of listing pagination
"""

import math

import pytest

from course_management.core.pagination import Page, build_page


class TestBuildPageCounts:
    """Total pages and slicing."""

    @pytest.mark.parametrize("total", [0, 1, 4, 5, 6, 23])
    @pytest.mark.parametrize("page_size", [1, 3, 5, 10])
    def test_total_pages_is_ceiling_of_count_over_size(self, total: int, page_size: int) -> None:
        page = build_page(list(range(total)), 1, page_size)

        assert page.total_pages == math.ceil(total / page_size)
        assert page.total_count == total

    @pytest.mark.parametrize("total,page_size", [(0, 3), (7, 3), (9, 3), (10, 1)])
    def test_walking_all_pages_reproduces_sequence_without_duplicates(
        self, total: int, page_size: int
    ) -> None:
        items = list(range(total))
        first = build_page(items, 1, page_size)

        collected = []
        for number in range(1, first.total_pages + 1):
            collected.extend(build_page(items, number, page_size).items)

        assert collected == items

    def test_last_page_may_be_short(self) -> None:
        page = build_page(list("abcdefg"), 3, 3)

        assert page.items == ["g"]
        assert page.page_number == 3


class TestBuildPageClamping:
    """Out-of-range page numbers are clamped, never rejected."""

    @pytest.mark.parametrize("requested", [0, -1, -50, None])
    def test_low_page_number_clamps_to_first_page(self, requested) -> None:
        page = build_page(list(range(10)), requested, 3)

        assert page.page_number == 1
        assert page.items == [0, 1, 2]

    def test_page_number_beyond_end_clamps_to_last_page(self) -> None:
        page = build_page(list(range(10)), 99, 3)

        assert page.page_number == 4
        assert page.items == [9]
        assert page.has_next is False
        assert page.has_previous is True

    def test_empty_sequence_gives_empty_page_without_navigation(self) -> None:
        page = build_page([], 3, 5)

        assert page.items == []
        assert page.total_pages == 0
        assert page.page_number == 1
        assert page.has_previous is False
        assert page.has_next is False

    def test_zero_page_size_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            build_page([1, 2], 1, 0)


class TestPageNavigation:
    """has_previous / has_next flags."""

    def test_middle_page_has_both_neighbours(self) -> None:
        page = build_page(list(range(9)), 2, 3)

        assert page.has_previous is True
        assert page.has_next is True

    def test_single_page_has_no_neighbours(self) -> None:
        page = build_page([1, 2], 1, 5)

        assert page.has_previous is False
        assert page.has_next is False

    def test_page_is_frozen(self) -> None:
        page = Page(items=[1], page_number=1, total_pages=1, total_count=1, page_size=1)

        with pytest.raises(AttributeError):
            page.page_number = 2  # type: ignore[misc]
