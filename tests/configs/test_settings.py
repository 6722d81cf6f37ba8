"""
Test suite for the settings layer.

Settings are built directly (not through the cached get_settings) so each
test sees its own environment.

System role: Verification of environment-driven configuration
"""

from course_management.configs.base import BaseSettings
from course_management.configs.database import DatabaseSettings
from course_management.configs.pagination import PaginationSettings


class TestBaseSettings:
    """Shared fields every settings group inherits."""

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        settings = BaseSettings()

        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.debug is False

    def test_env_names_are_case_insensitive(self, monkeypatch) -> None:
        monkeypatch.setenv("log_level", "debug")
        monkeypatch.setenv("ENVIRONMENT", "staging")

        settings = BaseSettings()

        assert settings.log_level == "debug"
        assert settings.environment == "staging"

    def test_unrelated_keys_are_ignored(self, monkeypatch) -> None:
        monkeypatch.setenv("PAGINATION_PAGE_SIZE", "25")

        settings = BaseSettings()

        assert not hasattr(settings, "page_size")


class TestPaginationSettings:
    """PAGINATION_ prefixed listing sizes."""

    def test_prefixed_values_are_read(self, monkeypatch) -> None:
        monkeypatch.setenv("PAGINATION_PAGE_SIZE", "25")
        monkeypatch.setenv("PAGINATION_MAX_PAGE_SIZE", "50")

        settings = PaginationSettings()

        assert settings.page_size == 25
        assert settings.max_page_size == 50


class TestDatabaseSettings:
    """URL override for SQLite development databases."""

    def test_url_override_selects_sqlite(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_URL", "sqlite+aiosqlite:///./lessons.db")

        settings = DatabaseSettings()

        assert settings.is_sqlite
        assert settings.async_database_url == "sqlite+aiosqlite:///./lessons.db"
        assert settings.database_url == "sqlite:///./lessons.db"

    def test_postgres_urls_use_both_drivers(self, monkeypatch) -> None:
        monkeypatch.delenv("POSTGRES_URL", raising=False)
        monkeypatch.setenv("POSTGRES_HOST", "db")

        settings = DatabaseSettings()

        assert not settings.is_sqlite
        assert settings.database_url.startswith("postgresql+psycopg://postgres:postgres@db:5432/")
        assert settings.async_database_url.startswith("postgresql+asyncpg://")
