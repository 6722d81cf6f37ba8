"""
Lesson error handling utilities.

Provides a decorator for consistent error handling across
lesson-related API endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from course_management.core.exceptions import LessonNotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_lesson_errors(func: F) -> F:
    """
    Decorator to handle lesson-related errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context (lesson_id)
    - Mapping domain and store exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except LessonNotFoundError as e:
            logger.warning(
                "Lesson not found",
                extra={"lesson_id": e.lesson_id, "error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=e.message
            )

        except ValidationError as e:
            logger.warning("Invalid lesson request", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.message
            )

        except IntegrityError as e:
            logger.warning("Lesson write rejected by store", extra={"error": str(e.orig)})
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Lesson write violates a store constraint"
            )

        except SQLAlchemyError as e:
            logger.error("Lesson store failure", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Lesson store error"
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in lesson operation",
                extra={"error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during lesson operation"
            )

    return wrapper  # type: ignore
