"""
Core domain logic: lesson query resolution, pagination and exceptions.

Pure Python; no database or HTTP imports.
"""

from course_management.core.exceptions import (
    CourseManagementException,
    LessonNotFoundError,
    ValidationError,
)
from course_management.core.lesson_query import (
    LessonListQuery,
    LessonSortOrder,
    ResolvedLessonQuery,
    resolve_lesson_query,
    sort_toggles,
)
from course_management.core.pagination import Page, build_page

__all__ = [
    "CourseManagementException",
    "LessonNotFoundError",
    "ValidationError",
    "LessonListQuery",
    "LessonSortOrder",
    "ResolvedLessonQuery",
    "resolve_lesson_query",
    "sort_toggles",
    "Page",
    "build_page",
]
