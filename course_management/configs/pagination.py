"""
Pagination configuration settings.

Page size used by lesson listings when the caller does not pick one,
and the upper bound accepted from callers.

Dependencies: pydantic, pydantic_settings
System role: Listing configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from course_management.configs.base import BaseSettings


class PaginationSettings(BaseSettings):
    """Lesson listing pagination configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAGINATION_",
        case_sensitive=False,
        extra="ignore",
    )

    page_size: int = Field(default=10, ge=1, description="Default lessons per page")
    max_page_size: int = Field(default=100, ge=1, description="Largest page size a caller may request")
