"""
Lesson record/view mapping.

Converts between LessonModel rows and the caller-facing LessonViewModel,
and turns a LessonRequest into column values for insert or update.

Dependencies: course_management.boundary.db.models, course_management.models
System role: Lesson persistence/view adapter
"""

from typing import Any, Iterable

from course_management.boundary.db.models.lesson_model import LessonModel
from course_management.models.lesson import LessonRequest, LessonViewModel

# Columns a request may write; id and date_created are owned by the store.
_MUTABLE_FIELDS = ("title", "introduction", "course_id")


def request_to_record_values(request: LessonRequest) -> dict[str, Any]:
    """
    Map a create/update request onto lesson column values.

    Args:
        request: Validated lesson request

    Returns:
        dict: Column name to value for the mutable lesson columns
    """
    return request.model_dump(include=set(_MUTABLE_FIELDS))


def record_to_view(record: LessonModel) -> LessonViewModel:
    """
    Map a lesson row onto its view model.

    Args:
        record: Loaded LessonModel

    Returns:
        LessonViewModel: Caller-facing lesson
    """
    return LessonViewModel.model_validate(record)


def records_to_views(records: Iterable[LessonModel]) -> list[LessonViewModel]:
    """Map lesson rows onto view models, preserving order."""
    return [record_to_view(record) for record in records]
