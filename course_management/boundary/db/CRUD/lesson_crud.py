"""
Lesson CRUD operations.

Extends the generic CRUD with the filtered, searched and sorted lesson
query used by the lesson listing.

Dependencies: sqlalchemy, course_management.boundary.db.models, course_management.core
System role: Lesson persistence operations
"""

from typing import Sequence

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from course_management.boundary.db.models.lesson_model import LessonModel
from course_management.boundary.db.CRUD.base_crud import BaseCRUD
from course_management.boundary.db.sql_functions import substring_position
from course_management.core.lesson_query import LessonSortOrder


class LessonCRUD(BaseCRUD[LessonModel]):
    """
    CRUD operations for LessonModel.

    Every ordering ends with ``id`` ascending so that rows sharing a sort
    key keep the same relative order between calls.
    """

    def __init__(self) -> None:
        """Initialize LessonCRUD with LessonModel."""
        super().__init__(LessonModel)

    def build_filtered_statement(
        self,
        course_id: int | None = None,
        search_text: str | None = None,
        sort_order: LessonSortOrder = LessonSortOrder.TITLE,
    ) -> Select:
        """
        Compose the lesson listing query.

        Args:
            course_id: Restrict to this course when given
            search_text: Case-sensitive substring matched against title OR
                introduction; ignored when empty
            sort_order: One of the closed set of lesson orderings

        Returns:
            Select: Statement ready for execution
        """
        stmt = select(LessonModel)

        if course_id is not None:
            stmt = stmt.where(LessonModel.course_id == course_id)

        if search_text:
            stmt = stmt.where(
                or_(
                    substring_position(LessonModel.title, search_text) > 0,
                    substring_position(LessonModel.introduction, search_text) > 0,
                )
            )

        if sort_order is LessonSortOrder.TITLE_DESC:
            ordering = LessonModel.title.desc()
        elif sort_order is LessonSortOrder.DATE_CREATED:
            ordering = LessonModel.date_created.asc()
        elif sort_order is LessonSortOrder.DATE_CREATED_DESC:
            ordering = LessonModel.date_created.desc()
        else:
            ordering = LessonModel.title.asc()

        return stmt.order_by(ordering, LessonModel.id.asc())

    async def get_filtered(
        self,
        session: AsyncSession,
        course_id: int | None = None,
        search_text: str | None = None,
        sort_order: LessonSortOrder = LessonSortOrder.TITLE,
    ) -> Sequence[LessonModel]:
        """
        Materialize the filtered, sorted lesson sequence.

        Args:
            session: Async database session
            course_id: Optional course scope
            search_text: Optional search text
            sort_order: Resolved sort order

        Returns:
            Sequence of LessonModels in listing order
        """
        stmt = self.build_filtered_statement(
            course_id=course_id,
            search_text=search_text,
            sort_order=sort_order,
        )
        result = await session.execute(stmt)
        return result.scalars().all()


lesson_crud = LessonCRUD()
