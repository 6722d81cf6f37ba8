"""
Lesson ORM model.

A lesson belongs to a course and is the entity served by the
filtered, sorted and paginated lesson listing.

Dependencies: sqlalchemy, course_management.boundary.db.base
System role: Lesson persistence
"""

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from course_management.boundary.db.base import Base, IntegerIdMixin, TimestampMixin


class LessonModel(Base, IntegerIdMixin, TimestampMixin):
    """
    Lesson ORM model.

    Attributes:
        id: Integer primary key, assigned by the store, never reused
        title: Lesson title (searchable, sortable)
        introduction: Optional introduction text (searchable)
        course_id: Owning course
        date_created: Creation timestamp, used for chronological sort
        date_updated: Last modification timestamp
    """

    __tablename__ = "lessons"
    __table_args__ = (
        Index("ix_lessons_course_id", "course_id"),
        Index("ix_lessons_title", "title"),
        Index("ix_lessons_date_created", "date_created"),
        {"sqlite_autoincrement": True},
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Lesson title"
    )

    introduction: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        doc="Lesson introduction"
    )

    course_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("courses.id"),
        nullable=False,
        doc="Owning course"
    )

    course = relationship("CourseModel", back_populates="lessons")

    def __repr__(self) -> str:
        return f"<LessonModel id={self.id} course_id={self.course_id} title={self.title!r}>"
