"""
Lesson listing query resolution.

Turns raw listing parameters (sort order, previous filter, new search
text, course scope, requested page) into the resolved values the store
query and the page builder consume.

Dependencies: None (pure domain layer)
System role: Lesson listing parameter resolution
"""

from dataclasses import dataclass
from enum import Enum


class LessonSortOrder(str, Enum):
    """Closed set of lesson orderings. TITLE is the fallback."""

    TITLE = ""
    TITLE_DESC = "title_desc"
    DATE_CREATED = "date_created"
    DATE_CREATED_DESC = "date_created_desc"

    @classmethod
    def parse(cls, value: "str | LessonSortOrder | None") -> "LessonSortOrder":
        """
        Map a raw sort parameter onto the closed set.

        Unknown, empty and missing values all resolve to TITLE.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value or "")
        except ValueError:
            return cls.TITLE


@dataclass(frozen=True)
class LessonListQuery:
    """Caller-supplied listing parameters."""

    sort_order: str | None = None
    current_filter: str | None = None
    search_string: str | None = None
    course_id: int | None = None
    page_number: int | None = None
    page_size: int = 10


@dataclass(frozen=True)
class ResolvedLessonQuery:
    """Listing parameters after search and sort resolution."""

    sort_order: LessonSortOrder
    search_text: str | None
    course_id: int | None
    page_number: int | None
    page_size: int


def resolve_lesson_query(query: LessonListQuery) -> ResolvedLessonQuery:
    """
    Resolve the active search text, page number and sort order.

    Any search_string that is not None, including "", is a new search:
    it replaces current_filter and restarts pagination at page 1.
    Otherwise current_filter stays active and page_number is kept.

    Args:
        query: Raw listing parameters

    Returns:
        ResolvedLessonQuery: Values for the store query and page builder
    """
    if query.search_string is not None:
        search_text = query.search_string
        page_number: int | None = 1
    else:
        search_text = query.current_filter
        page_number = query.page_number

    return ResolvedLessonQuery(
        sort_order=LessonSortOrder.parse(query.sort_order),
        search_text=search_text,
        course_id=query.course_id,
        page_number=page_number,
        page_size=query.page_size,
    )


def sort_toggles(sort_order: LessonSortOrder) -> dict[str, str]:
    """
    Sort parameters a listing header should link to next.

    Clicking the title column flips between ascending and descending title;
    clicking the date column flips between oldest and newest first.

    Args:
        sort_order: Currently active sort order

    Returns:
        dict: {"title": <param>, "date_created": <param>}
    """
    title = (
        LessonSortOrder.TITLE_DESC if sort_order is LessonSortOrder.TITLE else LessonSortOrder.TITLE
    )
    date_created = (
        LessonSortOrder.DATE_CREATED_DESC
        if sort_order is LessonSortOrder.DATE_CREATED
        else LessonSortOrder.DATE_CREATED
    )
    return {"title": title.value, "date_created": date_created.value}
