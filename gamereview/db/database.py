"""
SQLAlchemy database setup and connection management.
"""
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import declarative_base

from gamereview.core.config import settings
from gamereview.core.logging import logger

# Create engine
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    future=True,
    pool_pre_ping=True,
)

# Base class for all table models
Base = declarative_base()


@contextmanager
def get_connection(bind: Optional[Engine] = None) -> Iterator[Connection]:
    """
    Scoped connection for repository calls.

    Commits when the block exits cleanly and rolls back otherwise.

    Usage:
        with get_connection() as conn:
            insert_reviewer(conn, reviewer)
    """
    with (bind or engine).begin() as conn:
        yield conn


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create the reviewer and review tables.

    Note: In production the schema is owned by migrations, not this call.
    """
    # Import all models here to ensure they are registered
    from gamereview.models import reviewer, review  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables created", extra={"tables": sorted(Base.metadata.tables)})


def close_db(bind: Optional[Engine] = None) -> None:
    """
    Close database connections.
    """
    (bind or engine).dispose()
    logger.info("Database connections closed")
