"""
Course ORM model.

Parent container that lessons reference through lessons.course_id.

Dependencies: sqlalchemy, course_management.boundary.db.base
System role: Course persistence (foreign key target for lessons)
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from course_management.boundary.db.base import Base, IntegerIdMixin, TimestampMixin


class CourseModel(Base, IntegerIdMixin, TimestampMixin):
    """
    Course ORM model.

    Deleting a course does not touch its lessons; no cascade is
    configured in either direction.

    Attributes:
        id: Integer primary key (store-assigned)
        title: Course title (255 char limit)
        description: Optional course description (up to 4096 chars)
        lessons: Lessons that belong to this course
    """

    __tablename__ = "courses"
    __table_args__ = {"sqlite_autoincrement": True}

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Course title"
    )

    description: Mapped[str | None] = mapped_column(
        String(4096),
        nullable=True,
        default=None,
        doc="Course description"
    )

    lessons = relationship(
        "LessonModel",
        back_populates="course",
        passive_deletes=True,
    )
