"""
Test suite for lesson listing query resolution.

Covers search text resolution, page reset on a new search, sort order
parsing and header sort toggles.

System role: Verification of listing parameter resolution
"""

import pytest

from course_management.core.lesson_query import (
    LessonListQuery,
    LessonSortOrder,
    resolve_lesson_query,
    sort_toggles,
)


class TestSearchResolution:
    """New search text versus the previously active filter."""

    def test_new_search_resets_page_to_one(self) -> None:
        resolved = resolve_lesson_query(
            LessonListQuery(search_string="intro", current_filter="old", page_number=4)
        )

        assert resolved.search_text == "intro"
        assert resolved.page_number == 1

    def test_empty_search_string_counts_as_new_search(self) -> None:
        resolved = resolve_lesson_query(
            LessonListQuery(search_string="", current_filter="old", page_number=3)
        )

        assert resolved.search_text == ""
        assert resolved.page_number == 1

    def test_missing_search_string_keeps_current_filter_and_page(self) -> None:
        resolved = resolve_lesson_query(LessonListQuery(current_filter="old", page_number=3))

        assert resolved.search_text == "old"
        assert resolved.page_number == 3

    def test_course_and_page_size_pass_through(self) -> None:
        resolved = resolve_lesson_query(LessonListQuery(course_id=5, page_size=25))

        assert resolved.course_id == 5
        assert resolved.page_size == 25
        assert resolved.search_text is None
        assert resolved.page_number is None


class TestSortOrder:
    """Closed set of sort orders with a title fallback."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("title_desc", LessonSortOrder.TITLE_DESC),
            ("date_created", LessonSortOrder.DATE_CREATED),
            ("date_created_desc", LessonSortOrder.DATE_CREATED_DESC),
            ("", LessonSortOrder.TITLE),
            (None, LessonSortOrder.TITLE),
            ("popularity", LessonSortOrder.TITLE),
            ("TITLE_DESC", LessonSortOrder.TITLE),
        ],
    )
    def test_parse(self, raw, expected) -> None:
        assert LessonSortOrder.parse(raw) is expected

    def test_resolution_parses_sort_order(self) -> None:
        resolved = resolve_lesson_query(LessonListQuery(sort_order="date_created_desc"))

        assert resolved.sort_order is LessonSortOrder.DATE_CREATED_DESC


class TestSortToggles:
    """Next sort parameter for each column header."""

    def test_title_ascending_toggles_to_descending(self) -> None:
        assert sort_toggles(LessonSortOrder.TITLE) == {"title": "title_desc", "date_created": "date_created"}

    def test_title_descending_toggles_back_to_default(self) -> None:
        assert sort_toggles(LessonSortOrder.TITLE_DESC)["title"] == ""

    def test_date_ascending_toggles_to_descending(self) -> None:
        assert sort_toggles(LessonSortOrder.DATE_CREATED) == {"title": "", "date_created": "date_created_desc"}

    def test_date_descending_toggles_to_ascending(self) -> None:
        assert sort_toggles(LessonSortOrder.DATE_CREATED_DESC)["date_created"] == "date_created"
