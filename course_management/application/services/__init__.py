"""Service orchestrators."""

from .lesson_service import LessonListing, LessonService

__all__ = [
    "LessonListing",
    "LessonService",
]
