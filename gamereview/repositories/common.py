"""
Helpers shared by the reviewer and review repositories.
"""
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

from sqlalchemy.engine import Connection, CursorResult
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.elements import TextClause

from gamereview.core.exceptions import AppException, StorageException
from gamereview.core.logging import log_error

T = TypeVar("T")

# Escape character for LIKE patterns, paired with ESCAPE '!' in the SQL
LIKE_ESCAPE = "!"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so `value` only ever matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(value: str) -> str:
    return f"%{escape_like(value)}%"


def execute(
    conn: Connection, statement: TextClause, parameters: Dict[str, Any], operation: str
) -> CursorResult:
    """
    Run one prepared statement.

    Driver and constraint errors are logged and re-raised as StorageException
    with the driver's message; the original stays on __cause__.
    """
    try:
        return conn.execute(statement, parameters)
    except SQLAlchemyError as e:
        log_error("Storage operation failed", error=e, operation=operation)
        raise StorageException(
            str(e.orig) if getattr(e, "orig", None) is not None else str(e),
            details={"operation": operation},
        ) from e


def rebuild(factory: Callable[[Mapping[str, Any]], T], row: Mapping[str, Any], operation: str) -> T:
    """Re-validate a stored row; a row that fails validation is a storage error."""
    try:
        return factory(row)
    except AppException as e:
        log_error("Stored row failed validation", error=e, operation=operation)
        raise StorageException(
            e.message,
            details={"operation": operation, "cause": e.error_code.value, **e.details},
        ) from e


def fetch_one(
    result: CursorResult, factory: Callable[[Mapping[str, Any]], T], operation: str
) -> Optional[T]:
    row = result.mappings().first()
    if row is None:
        return None
    return rebuild(factory, row, operation)


def fetch_all(
    result: CursorResult, factory: Callable[[Mapping[str, Any]], T], operation: str
) -> List[T]:
    return [rebuild(factory, row, operation) for row in result.mappings().all()]
