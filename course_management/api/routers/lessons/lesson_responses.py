"""
Lesson response mapping utilities.

Transforms service results into Pydantic response models.

Dependencies: course_management.models, course_management.application.services
System role: Lesson response transformation
"""

from course_management.application.services.lesson_service import LessonListing
from course_management.models.common import WriteResponse
from course_management.models.lesson import LessonPageResponse


def map_listing_to_response(listing: LessonListing) -> LessonPageResponse:
    """
    Transform a lesson listing into LessonPageResponse.

    Args:
        listing: Page of lessons plus resolved listing state

    Returns:
        LessonPageResponse: Pydantic model for API response
    """
    page = listing.page
    return LessonPageResponse(
        items=page.items,
        page_number=page.page_number,
        page_size=page.page_size,
        total_pages=page.total_pages,
        total_count=page.total_count,
        has_previous=page.has_previous,
        has_next=page.has_next,
        current_filter=listing.current_filter,
        current_sort=listing.current_sort.value,
        course_id=listing.course_id,
        sort_toggles=listing.sort_toggles,
    )


def map_rows_to_response(rows_affected: int) -> WriteResponse:
    """Wrap an affected-row count."""
    return WriteResponse(rows_affected=rows_affected)
