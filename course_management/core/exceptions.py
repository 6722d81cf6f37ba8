"""
Exception hierarchy for the course management application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Persistence failures are not wrapped: sqlalchemy.exc.SQLAlchemyError
propagates unchanged from the store.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CourseManagementException(Exception):
    """Base exception for all course management application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(CourseManagementException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class LessonNotFoundError(CourseManagementException):
    """Raised when an operation requires a lesson that does not exist."""

    def __init__(self, lesson_id: int, details: dict[str, Any] | None = None) -> None:
        """
        Initialize lesson not found error.

        Args:
            lesson_id: ID of the missing lesson
            details: Additional context
        """
        self.lesson_id = lesson_id
        details = details or {}
        details["lesson_id"] = lesson_id
        super().__init__(f"Lesson not found: {lesson_id}", details)
