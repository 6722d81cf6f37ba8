"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, course_management.configs
System role: Database schema initialization

Usage:
    python -m course_management.boundary.db.create_tables
"""

import logging

from course_management.boundary.db.base import Base
from course_management.boundary.db.connection import get_engine

# Import all models to register them with Base.metadata
from course_management.boundary.db.models import CourseModel, LessonModel  # noqa: F401

logger = logging.getLogger(__name__)


def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created", extra={"tables": sorted(Base.metadata.tables)})


def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    logger.warning("All tables dropped")


if __name__ == "__main__":
    from course_management.observability.logger import configure_logging

    configure_logging()
    create_all_tables()
