"""
Lesson domain models and schemas.

Request/response schemas for lesson operations.

Dependencies: pydantic
System role: Lesson API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from course_management.models.common import PaginatedResponse


class LessonRequest(BaseModel):
    """Request schema for creating or updating a lesson."""

    title: str = Field(..., min_length=1, max_length=255, description="Lesson title")
    introduction: str | None = Field(None, description="Lesson introduction")
    course_id: int = Field(..., ge=1, description="Owning course ID")


class LessonViewModel(BaseModel):
    """Caller-facing lesson representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    introduction: str | None = None
    course_id: int
    date_created: datetime


class LessonPageResponse(PaginatedResponse[LessonViewModel]):
    """One page of lessons plus the state needed to request the next one."""

    current_filter: str | None = Field(None, description="Search text to send back as current_filter")
    current_sort: str = Field("", description="Active sort order")
    course_id: int | None = None
    sort_toggles: dict[str, str] = Field(
        default_factory=dict,
        description="Sort parameter for each sortable column's next click",
    )
