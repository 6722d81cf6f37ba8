"""
Database models package.

Exports:
  - CourseModel: Course ORM model
  - LessonModel: Lesson ORM model

Dependencies: sqlalchemy, course_management.boundary.db.base
System role: Database model definitions for domain entities
"""

from course_management.boundary.db.models.course_model import CourseModel
from course_management.boundary.db.models.lesson_model import LessonModel

__all__ = [
    "CourseModel",
    "LessonModel",
]
