"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_lesson_service,
    get_settings_dependency,
)

__all__ = [
    "get_lesson_service",
    "get_settings_dependency",
]
