"""
Common response models and utilities.

Generic response wrappers for list and write endpoints.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic page-number paginated response wrapper."""

    items: list[T]
    page_number: int = Field(description="Current 1-based page after clamping")
    page_size: int
    total_pages: int
    total_count: int
    has_previous: bool = False
    has_next: bool = False


class WriteResponse(BaseModel):
    """Result of a create, update or delete."""

    rows_affected: int = Field(description="Rows written by the store (0 means nothing changed)")
