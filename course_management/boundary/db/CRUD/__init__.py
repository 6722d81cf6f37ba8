"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from course_management.boundary.db.CRUD import lesson_crud

    lesson = await lesson_crud.get_by_id(db, lesson_id)
"""

from course_management.boundary.db.CRUD.base_crud import BaseCRUD
from course_management.boundary.db.CRUD.lesson_crud import LessonCRUD, lesson_crud

__all__ = [
    "BaseCRUD",
    "LessonCRUD",
    "lesson_crud",
]
