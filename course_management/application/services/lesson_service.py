"""
Lesson service orchestrator.

Coordinates the lesson listing (resolve → query → materialize → map →
paginate) and the lesson lifecycle operations.

Dependencies: course_management.boundary.db.CRUD, course_management.core,
    course_management.application.adapters
System role: Lesson use case orchestration
"""

import logging
from dataclasses import dataclass, field

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from course_management.application.adapters.lesson_mapper import (
    record_to_view,
    records_to_views,
    request_to_record_values,
)
from course_management.boundary.db.CRUD.lesson_crud import lesson_crud
from course_management.core.exceptions import LessonNotFoundError
from course_management.core.lesson_query import (
    LessonListQuery,
    LessonSortOrder,
    resolve_lesson_query,
    sort_toggles,
)
from course_management.core.pagination import Page, build_page
from course_management.models.lesson import LessonRequest, LessonViewModel
from course_management.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LessonListing:
    """A page of lessons plus the listing state to echo back to the caller."""

    page: Page[LessonViewModel]
    current_filter: str | None
    current_sort: LessonSortOrder
    course_id: int | None
    sort_toggles: dict[str, str] = field(default_factory=dict)


class LessonService:
    """Lesson service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize lesson service with async database session.

        Args:
            db: Async SQLAlchemy session (one unit of work per request)
        """
        self.db = db

    async def list_lessons(self, query: LessonListQuery) -> LessonListing:
        """
        Filter, search, sort and paginate lessons.

        Args:
            query: Listing parameters

        Returns:
            LessonListing: Requested page and resolved listing state

        Raises:
            SQLAlchemyError: If the store read fails
        """
        resolved = resolve_lesson_query(query)

        try:
            records = await lesson_crud.get_filtered(
                self.db,
                course_id=resolved.course_id,
                search_text=resolved.search_text,
                sort_order=resolved.sort_order,
            )
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger,
                "Failed to list lessons",
                e,
                course_id=resolved.course_id,
                search_text=resolved.search_text,
                sort_order=resolved.sort_order.value,
            )
            raise

        page = build_page(records_to_views(records), resolved.page_number, resolved.page_size)

        logger.debug(
            "Lessons listed",
            extra={
                "course_id": resolved.course_id,
                "total_count": page.total_count,
                "page_number": page.page_number,
                "total_pages": page.total_pages,
            },
        )

        return LessonListing(
            page=page,
            current_filter=resolved.search_text,
            current_sort=resolved.sort_order,
            course_id=resolved.course_id,
            sort_toggles=sort_toggles(resolved.sort_order),
        )

    async def get_lesson(self, lesson_id: int) -> LessonViewModel | None:
        """
        Get lesson by ID.

        Args:
            lesson_id: Lesson ID

        Returns:
            LessonViewModel if found, None otherwise
        """
        try:
            lesson = await lesson_crud.get_by_id(self.db, lesson_id)
        except SQLAlchemyError as e:
            log_exception_with_context(logger, "Failed to get lesson", e, lesson_id=lesson_id)
            raise

        if lesson is None:
            return None
        return record_to_view(lesson)

    async def create_lesson(self, request: LessonRequest) -> int:
        """
        Create a lesson.

        Args:
            request: Title, introduction and course ID

        Returns:
            int: Always 1; a failed insert raises instead

        Raises:
            SQLAlchemyError: If the insert fails (e.g. unknown course)
        """
        try:
            lesson = await lesson_crud.create(self.db, **request_to_record_values(request))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            log_exception_with_context(
                logger, "Failed to create lesson", e, course_id=request.course_id, title=request.title
            )
            raise

        logger.info(
            "Lesson created",
            extra={"lesson_id": lesson.id, "course_id": lesson.course_id},
        )
        return 1

    async def update_lesson(self, lesson_id: int, request: LessonRequest) -> int:
        """
        Replace a lesson's title, introduction and course.

        Args:
            lesson_id: Lesson ID
            request: New field values

        Returns:
            int: Rows affected

        Raises:
            LessonNotFoundError: If the lesson does not exist (nothing is written)
            SQLAlchemyError: If the update fails
        """
        try:
            if not await lesson_crud.exists(self.db, lesson_id):
                raise LessonNotFoundError(lesson_id)

            rows = await lesson_crud.update_by_id(
                self.db, lesson_id, **request_to_record_values(request)
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            log_exception_with_context(logger, "Failed to update lesson", e, lesson_id=lesson_id)
            raise

        logger.info("Lesson updated", extra={"lesson_id": lesson_id, "rows_affected": rows})
        return rows

    async def delete_lesson(self, lesson_id: int) -> int:
        """
        Delete a lesson if it exists.

        A missing lesson is not an error: nothing is removed and 0 is returned.

        Args:
            lesson_id: Lesson ID

        Returns:
            int: Rows deleted (0 or 1)

        Raises:
            SQLAlchemyError: If the delete fails
        """
        try:
            rows = await lesson_crud.delete_by_id(self.db, lesson_id)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            log_exception_with_context(logger, "Failed to delete lesson", e, lesson_id=lesson_id)
            raise

        if rows:
            logger.info("Lesson deleted", extra={"lesson_id": lesson_id})
        else:
            logger.info("Lesson delete skipped, not found", extra={"lesson_id": lesson_id})
        return rows
