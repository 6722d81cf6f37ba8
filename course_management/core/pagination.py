"""
Page-of-results container and page builder.

Slices a fully materialized, ordered sequence into one page. The requested
page number is clamped, never rejected.

Dependencies: None (pure domain layer)
System role: Listing pagination
"""

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A single page of items plus navigation metadata."""

    items: list[T]
    page_number: int  # 1-based, clamped
    total_pages: int
    total_count: int
    page_size: int

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages


def build_page(items: Sequence[T], page_number: int | None, page_size: int) -> Page[T]:
    """
    Build one page from an ordered sequence.

    Args:
        items: Fully materialized, ordered items
        page_number: Requested 1-based page; None or < 1 means page 1,
            past the end means the last page
        page_size: Items per page, at least 1

    Returns:
        Page: The clamped page (empty when items is empty)

    Raises:
        ValueError: If page_size is less than 1
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    total_count = len(items)
    total_pages = math.ceil(total_count / page_size)

    page = max(page_number or 1, 1)
    page = min(page, max(total_pages, 1))

    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        page_number=page,
        total_pages=total_pages,
        total_count=total_count,
        page_size=page_size,
    )
