"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory async database, seeded lessons, service mocks
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from course_management.boundary.db.base import Base
    from course_management.boundary.db import models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


def utc(year: int, month: int = 1, day: int = 1) -> datetime:
    """Aware UTC datetime helper."""
    return datetime(year, month, day, tzinfo=timezone.utc)


@pytest.fixture
async def seeded_lessons(test_async_db):
    """
    Insert two courses and six lessons.

    Course 5: "Algebra" (2021), "Biology" (2022), "Chemistry" (2020, intro mentions "intro"),
              "Drawing" (2023, intro mentions "intro")
    Course 7: "Economics" (2019, intro mentions "intro"), "Algebra" (2024)

    Returns:
        AsyncSession: The session holding the seeded rows
    """
    from course_management.boundary.db.models import CourseModel, LessonModel

    test_async_db.add_all([
        CourseModel(id=5, title="Science"),
        CourseModel(id=7, title="Humanities"),
    ])
    await test_async_db.flush()

    test_async_db.add_all([
        LessonModel(id=1, title="Algebra", introduction="Numbers and symbols", course_id=5, date_created=utc(2021)),
        LessonModel(id=2, title="Biology", introduction=None, course_id=5, date_created=utc(2022)),
        LessonModel(id=3, title="Chemistry", introduction="An intro to atoms", course_id=5, date_created=utc(2020)),
        LessonModel(id=4, title="Drawing", introduction="intro to sketching", course_id=5, date_created=utc(2023)),
        LessonModel(id=5, title="Economics", introduction="intro to markets", course_id=7, date_created=utc(2019)),
        LessonModel(id=6, title="Algebra", introduction="Linear equations", course_id=7, date_created=utc(2024)),
    ])
    await test_async_db.commit()
    return test_async_db


@pytest.fixture
def mock_lesson_service():
    """
    Create mock LessonService for testing.

    Returns:
        AsyncMock: Mocked LessonService with async methods
    """
    service = AsyncMock()
    service.create_lesson = AsyncMock(return_value=1)
    service.update_lesson = AsyncMock(return_value=1)
    service.delete_lesson = AsyncMock(return_value=1)
    service.get_lesson = AsyncMock(return_value=None)
    service.db = AsyncMock()
    return service
