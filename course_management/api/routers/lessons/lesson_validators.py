"""
Lesson validation utilities.

Business logic validation not covered by Pydantic models.

Dependencies: course_management.models.lesson, course_management.core.exceptions
System role: Lesson business logic validation
"""

from course_management.core.exceptions import ValidationError
from course_management.models.lesson import LessonRequest


def validate_lesson_request(request: LessonRequest) -> None:
    """
    Validate lesson create/update request with business rules.

    Args:
        request: LessonRequest with title, introduction, course_id

    Raises:
        ValidationError: If business validation fails
    """
    if not request.title.strip():
        raise ValidationError("Lesson title cannot be empty or whitespace-only", field="title")

    if request.introduction is not None and len(request.introduction) > 10000:
        raise ValidationError("Lesson introduction cannot exceed 10000 characters", field="introduction")
