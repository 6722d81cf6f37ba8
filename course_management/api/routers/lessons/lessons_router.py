"""
Lesson API endpoints.

Routes:
- GET /lessons - Filtered, searched, sorted, paginated listing
- GET /lessons/{id} - Get single lesson
- POST /lessons - Create lesson
- PUT /lessons/{id} - Update lesson
- DELETE /lessons/{id} - Delete lesson (idempotent)

Dependencies: course_management.application.services, course_management.models
System role: Lesson management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from course_management.api.deps.dependencies import (
    get_lesson_service,
    get_settings_dependency,
)
from course_management.application.services.lesson_service import LessonService
from course_management.configs import Settings
from course_management.core.lesson_query import LessonListQuery
from course_management.models.common import WriteResponse
from course_management.models.lesson import (
    LessonPageResponse,
    LessonRequest,
    LessonViewModel,
)

from .lesson_error_handling import handle_lesson_errors
from .lesson_responses import map_listing_to_response, map_rows_to_response
from .lesson_validators import validate_lesson_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lessons", tags=["lessons"])


@router.get("", response_model=LessonPageResponse)
@handle_lesson_errors
async def list_lessons(
    sort_order: str | None = Query(None, description="title_desc, date_created, date_created_desc; anything else sorts by title"),
    current_filter: str | None = Query(None, description="Search text from the previous response"),
    search_string: str | None = Query(None, description="New search text; restarts at page 1"),
    course_id: int | None = Query(None, description="Only lessons of this course"),
    page_number: int | None = Query(None, description="1-based page; out-of-range values are clamped"),
    page_size: int | None = Query(None, ge=1, description="Lessons per page"),
    lesson_service: LessonService = Depends(get_lesson_service),
    settings: Settings = Depends(get_settings_dependency),
) -> LessonPageResponse:
    """
    List lessons with filtering, search, sorting and pagination.

    Returns:
        LessonPageResponse: One page plus the filter/sort state to send back

    Raises:
        HTTPException(400): page_size above the configured maximum
        HTTPException(500): Store failure
    """
    pagination = settings.pagination
    size = page_size or pagination.page_size
    if size > pagination.max_page_size:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"page_size cannot exceed {pagination.max_page_size}",
        )

    listing = await lesson_service.list_lessons(
        LessonListQuery(
            sort_order=sort_order,
            current_filter=current_filter,
            search_string=search_string,
            course_id=course_id,
            page_number=page_number,
            page_size=size,
        )
    )

    logger.info(
        "Lessons listed",
        extra={
            "course_id": course_id,
            "page_number": listing.page.page_number,
            "total_count": listing.page.total_count,
        },
    )

    return map_listing_to_response(listing)


@router.get("/{lesson_id}", response_model=LessonViewModel)
@handle_lesson_errors
async def get_lesson(
    lesson_id: int,
    lesson_service: LessonService = Depends(get_lesson_service),
) -> LessonViewModel:
    """
    Get single lesson by ID.

    Raises:
        HTTPException(404): Lesson not found
    """
    lesson = await lesson_service.get_lesson(lesson_id)
    if lesson is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Lesson not found: {lesson_id}",
        )
    return lesson


@router.post("", response_model=WriteResponse, status_code=201)
@handle_lesson_errors
async def create_lesson(
    request: LessonRequest,
    lesson_service: LessonService = Depends(get_lesson_service),
) -> WriteResponse:
    """
    Create new lesson.

    Raises:
        HTTPException(400): Invalid request
        HTTPException(409): Store constraint violated (e.g. unknown course)
        HTTPException(500): Store failure
    """
    validate_lesson_request(request)

    logger.info(
        "Creating lesson",
        extra={"course_id": request.course_id, "has_introduction": request.introduction is not None},
    )

    rows = await lesson_service.create_lesson(request)
    return map_rows_to_response(rows)


@router.put("/{lesson_id}", response_model=WriteResponse)
@handle_lesson_errors
async def update_lesson(
    lesson_id: int,
    request: LessonRequest,
    lesson_service: LessonService = Depends(get_lesson_service),
) -> WriteResponse:
    """
    Update lesson by ID.

    Raises:
        HTTPException(404): Lesson not found
        HTTPException(400): Invalid request
    """
    validate_lesson_request(request)

    rows = await lesson_service.update_lesson(lesson_id, request)
    return map_rows_to_response(rows)


@router.delete("/{lesson_id}", response_model=WriteResponse)
@handle_lesson_errors
async def delete_lesson(
    lesson_id: int,
    lesson_service: LessonService = Depends(get_lesson_service),
) -> WriteResponse:
    """
    Delete lesson by ID.

    Deleting a missing lesson succeeds with rows_affected = 0.
    """
    rows = await lesson_service.delete_lesson(lesson_id)
    return map_rows_to_response(rows)
