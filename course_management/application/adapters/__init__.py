"""Record/view adapters."""

from .lesson_mapper import (
    record_to_view,
    records_to_views,
    request_to_record_values,
)

__all__ = [
    "record_to_view",
    "records_to_views",
    "request_to_record_values",
]
