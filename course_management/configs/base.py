"""
Shared settings for the course management service.

Every settings group (database, pagination) subclasses BaseSettings so they
all read the same ``.env`` file and ignore keys meant for other groups.

Dependencies: pydantic_settings
System role: Common base of the configuration layer
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict
from pydantic import Field


class BaseSettings(PydanticBaseSettings):
    """Deployment-wide settings: environment name, debug reload and log level."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name, logged once at startup",
    )
    debug: bool = Field(
        default=False,
        description="Run uvicorn with auto-reload when started from main",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging (case-insensitive)",
    )
