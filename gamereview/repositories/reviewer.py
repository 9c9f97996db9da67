"""
Reviewer repository.

Each function runs exactly one prepared statement on the caller's connection.
The caller owns the connection and its transaction.
"""
import uuid
from typing import Any, Dict, List, Mapping, Optional, Union

from sqlalchemy import text
from sqlalchemy.engine import Connection

from gamereview.core.config import settings
from gamereview.core.logging import log_debug, log_info, log_warning
from gamereview.core.validation import (
    validate_email_address,
    validate_hex_token,
    validate_text,
    validate_uuid,
)
from gamereview.repositories.common import execute, fetch_all, fetch_one
from gamereview.schemas.reviewer import EMAIL_MAX_LENGTH, NICK_NAME_MAX_LENGTH, Reviewer

_COLUMNS = (
    "reviewer_id, reviewer_activation_token, reviewer_nick_name, reviewer_email, reviewer_hash"
)

INSERT_REVIEWER = text(
    f"INSERT INTO reviewer({_COLUMNS}) "
    "VALUES (:reviewer_id, :reviewer_activation_token, :reviewer_nick_name, "
    ":reviewer_email, :reviewer_hash)"
)
UPDATE_REVIEWER = text(
    "UPDATE reviewer SET reviewer_activation_token = :reviewer_activation_token, "
    "reviewer_nick_name = :reviewer_nick_name, reviewer_email = :reviewer_email, "
    "reviewer_hash = :reviewer_hash WHERE reviewer_id = :reviewer_id"
)
DELETE_REVIEWER = text("DELETE FROM reviewer WHERE reviewer_id = :reviewer_id")
SELECT_BY_ID = text(f"SELECT {_COLUMNS} FROM reviewer WHERE reviewer_id = :reviewer_id")
SELECT_BY_EMAIL = text(f"SELECT {_COLUMNS} FROM reviewer WHERE reviewer_email = :reviewer_email")
SELECT_BY_NICK_NAME = text(
    f"SELECT {_COLUMNS} FROM reviewer WHERE reviewer_nick_name = :reviewer_nick_name "
    "ORDER BY reviewer_id"
)
SELECT_BY_ACTIVATION_TOKEN = text(
    f"SELECT {_COLUMNS} FROM reviewer "
    "WHERE reviewer_activation_token = :reviewer_activation_token"
)


def _parameters(reviewer: Reviewer) -> Dict[str, Any]:
    return {
        "reviewer_id": reviewer.reviewer_id.bytes,
        "reviewer_activation_token": reviewer.reviewer_activation_token,
        "reviewer_nick_name": reviewer.reviewer_nick_name,
        "reviewer_email": reviewer.reviewer_email,
        "reviewer_hash": reviewer.reviewer_hash,
    }


def _from_row(row: Mapping[str, Any]) -> Reviewer:
    return Reviewer(
        reviewer_id=row["reviewer_id"],
        reviewer_activation_token=row["reviewer_activation_token"],
        reviewer_nick_name=row["reviewer_nick_name"],
        reviewer_email=row["reviewer_email"],
        reviewer_hash=row["reviewer_hash"],
    )


def insert_reviewer(conn: Connection, reviewer: Reviewer) -> None:
    """
    Insert a new reviewer row.

    There is no existence check; a duplicate id or email surfaces as the
    store's constraint error wrapped in StorageException.
    """
    reviewer = reviewer.revalidated()
    execute(conn, INSERT_REVIEWER, _parameters(reviewer), "insert_reviewer")
    log_info("Reviewer inserted", reviewer_id=str(reviewer.reviewer_id))


def update_reviewer(conn: Connection, reviewer: Reviewer) -> None:
    """Rewrite every mutable column of the reviewer's row. Missing rows are not reported."""
    reviewer = reviewer.revalidated()
    result = execute(conn, UPDATE_REVIEWER, _parameters(reviewer), "update_reviewer")
    if result.rowcount == 0:
        log_warning("Reviewer update matched no row", reviewer_id=str(reviewer.reviewer_id))
    log_info(
        "Reviewer updated", reviewer_id=str(reviewer.reviewer_id), rows_affected=result.rowcount
    )


def delete_reviewer(conn: Connection, reviewer: Reviewer) -> None:
    """Delete the reviewer's row. Deleting a missing row is a no-op."""
    result = execute(
        conn, DELETE_REVIEWER, {"reviewer_id": reviewer.reviewer_id.bytes}, "delete_reviewer"
    )
    log_info(
        "Reviewer deleted", reviewer_id=str(reviewer.reviewer_id), rows_affected=result.rowcount
    )


def get_reviewer_by_reviewer_id(
    conn: Connection, reviewer_id: Union[uuid.UUID, str, bytes]
) -> Optional[Reviewer]:
    """
    Get a reviewer by id.

    Args:
        conn: Open connection
        reviewer_id: Reviewer id as a UUID, its text or its bytes

    Returns:
        The reviewer, or None if there is no such row

    Raises:
        InvalidArgumentException: reviewer_id is not a uuid
        StorageException: the query failed or the stored row is invalid
    """
    reviewer_id = validate_uuid(reviewer_id, "reviewer_id")
    result = execute(
        conn, SELECT_BY_ID, {"reviewer_id": reviewer_id.bytes}, "get_reviewer_by_reviewer_id"
    )
    reviewer = fetch_one(result, _from_row, "get_reviewer_by_reviewer_id")
    log_debug("Reviewer lookup by id", reviewer_id=str(reviewer_id), found=reviewer is not None)
    return reviewer


def get_reviewer_by_reviewer_email(conn: Connection, reviewer_email: str) -> Optional[Reviewer]:
    """
    Get a reviewer by email.

    The email is validated and normalized the same way it was on insert.
    """
    reviewer_email = validate_email_address(reviewer_email, "reviewer_email", EMAIL_MAX_LENGTH)
    result = execute(
        conn,
        SELECT_BY_EMAIL,
        {"reviewer_email": reviewer_email},
        "get_reviewer_by_reviewer_email",
    )
    reviewer = fetch_one(result, _from_row, "get_reviewer_by_reviewer_email")
    log_debug("Reviewer lookup by email", found=reviewer is not None)
    return reviewer


def get_reviewer_by_reviewer_nick_name(conn: Connection, reviewer_nick_name: str) -> List[Reviewer]:
    """
    Get every reviewer with this exact nick name.

    Nick names are meant to be unique but the schema does not enforce it, so
    this returns a list (possibly empty).
    """
    reviewer_nick_name = validate_text(
        reviewer_nick_name, "reviewer_nick_name", NICK_NAME_MAX_LENGTH
    )
    result = execute(
        conn,
        SELECT_BY_NICK_NAME,
        {"reviewer_nick_name": reviewer_nick_name},
        "get_reviewer_by_reviewer_nick_name",
    )
    reviewers = fetch_all(result, _from_row, "get_reviewer_by_reviewer_nick_name")
    log_debug(
        "Reviewer lookup by nick name", nick_name=reviewer_nick_name, count=len(reviewers)
    )
    return reviewers


def get_reviewer_by_reviewer_activation_token(
    conn: Connection, reviewer_activation_token: str
) -> Optional[Reviewer]:
    """Get the reviewer still waiting on this activation token, if any."""
    reviewer_activation_token = validate_hex_token(
        reviewer_activation_token,
        "reviewer_activation_token",
        settings.ACTIVATION_TOKEN_LENGTH,
    )
    result = execute(
        conn,
        SELECT_BY_ACTIVATION_TOKEN,
        {"reviewer_activation_token": reviewer_activation_token},
        "get_reviewer_by_reviewer_activation_token",
    )
    reviewer = fetch_one(result, _from_row, "get_reviewer_by_reviewer_activation_token")
    log_debug("Reviewer lookup by activation token", found=reviewer is not None)
    return reviewer
