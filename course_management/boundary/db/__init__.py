"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIdMixin, TimestampMixin: Model building blocks
  - get_engine(): Sync engine for schema management
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - CourseModel, LessonModel: Domain entities
  - lesson_crud: CRUD operation singleton

Dependencies: sqlalchemy, course_management.configs
System role: Database adapter providing persistent storage for courses and lessons.
"""

from course_management.boundary.db.base import Base, IntegerIdMixin, TimestampMixin
from course_management.boundary.db.connection import (
    get_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from course_management.boundary.db.models import CourseModel, LessonModel
from course_management.boundary.db.CRUD import BaseCRUD, LessonCRUD, lesson_crud

__all__ = [
    # Base classes
    "Base",
    "IntegerIdMixin",
    "TimestampMixin",
    # Connection
    "get_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "CourseModel",
    "LessonModel",
    # CRUD
    "BaseCRUD",
    "LessonCRUD",
    "lesson_crud",
]
