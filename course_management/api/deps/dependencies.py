"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: course_management.configs, course_management.application, course_management.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from course_management.configs import Settings, get_settings
from course_management.boundary.db import get_async_db
from course_management.application.services.lesson_service import LessonService


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_lesson_service(db: AsyncSession = Depends(get_async_db)) -> LessonService:
    """
    Get lesson service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        LessonService: Lesson service bound to the request's session
    """
    return LessonService(db=db)
