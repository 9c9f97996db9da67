"""
Review repository.

Same conventions as the reviewer repository: one prepared statement per call
on a connection the caller owns. Lists come back ordered by review date.
"""
import uuid
from typing import Any, Dict, List, Mapping, Optional, Union

from sqlalchemy import text
from sqlalchemy.engine import Connection

from gamereview.core.logging import log_debug, log_info, log_warning
from gamereview.core.validation import (
    format_datetime,
    validate_int_range,
    validate_text,
    validate_uuid,
)
from gamereview.repositories.common import (
    LIKE_ESCAPE,
    contains_pattern,
    execute,
    fetch_all,
    fetch_one,
)
from gamereview.schemas.review import (
    CONSOLE_MAX_LENGTH,
    CONTENT_MAX_LENGTH,
    RATING_MAX,
    RATING_MIN,
    Review,
)

_COLUMNS = (
    "review_id, review_reviewer_id, review_console, review_date, review_rating, review_content"
)
_ORDER = "ORDER BY review_date, review_id"

INSERT_REVIEW = text(
    f"INSERT INTO review({_COLUMNS}) "
    "VALUES (:review_id, :review_reviewer_id, :review_console, :review_date, "
    ":review_rating, :review_content)"
)
UPDATE_REVIEW = text(
    "UPDATE review SET review_reviewer_id = :review_reviewer_id, "
    "review_console = :review_console, review_date = :review_date, "
    "review_rating = :review_rating, review_content = :review_content "
    "WHERE review_id = :review_id"
)
DELETE_REVIEW = text("DELETE FROM review WHERE review_id = :review_id")
SELECT_BY_ID = text(f"SELECT {_COLUMNS} FROM review WHERE review_id = :review_id")
SELECT_BY_REVIEWER_ID = text(
    f"SELECT {_COLUMNS} FROM review WHERE review_reviewer_id = :review_reviewer_id {_ORDER}"
)
SELECT_BY_CONSOLE = text(
    f"SELECT {_COLUMNS} FROM review "
    f"WHERE review_console LIKE :review_console ESCAPE '{LIKE_ESCAPE}' {_ORDER}"
)
SELECT_BY_CONTENT = text(
    f"SELECT {_COLUMNS} FROM review "
    f"WHERE review_content LIKE :review_content ESCAPE '{LIKE_ESCAPE}' {_ORDER}"
)
SELECT_BY_RATING = text(
    f"SELECT {_COLUMNS} FROM review WHERE review_rating = :review_rating {_ORDER}"
)
SELECT_ALL = text(f"SELECT {_COLUMNS} FROM review {_ORDER}")


def _parameters(review: Review) -> Dict[str, Any]:
    return {
        "review_id": review.review_id.bytes,
        "review_reviewer_id": review.review_reviewer_id.bytes,
        "review_console": review.review_console,
        "review_date": format_datetime(review.review_date),
        "review_rating": review.review_rating,
        "review_content": review.review_content,
    }


def _from_row(row: Mapping[str, Any]) -> Review:
    return Review(
        review_id=row["review_id"],
        review_reviewer_id=row["review_reviewer_id"],
        review_console=row["review_console"],
        review_date=row["review_date"],
        review_rating=row["review_rating"],
        review_content=row["review_content"],
    )


def insert_review(conn: Connection, review: Review) -> None:
    """Insert a new review row. No existence check is made first."""
    review = review.revalidated()
    execute(conn, INSERT_REVIEW, _parameters(review), "insert_review")
    log_info(
        "Review inserted",
        review_id=str(review.review_id),
        reviewer_id=str(review.review_reviewer_id),
    )


def update_review(conn: Connection, review: Review) -> None:
    """Rewrite every column but the key. Missing rows are not reported."""
    review = review.revalidated()
    result = execute(conn, UPDATE_REVIEW, _parameters(review), "update_review")
    if result.rowcount == 0:
        log_warning("Review update matched no row", review_id=str(review.review_id))
    log_info("Review updated", review_id=str(review.review_id), rows_affected=result.rowcount)


def delete_review(conn: Connection, review: Review) -> None:
    """Delete the review's row. Deleting a missing row is a no-op."""
    result = execute(conn, DELETE_REVIEW, {"review_id": review.review_id.bytes}, "delete_review")
    log_info("Review deleted", review_id=str(review.review_id), rows_affected=result.rowcount)


def get_review_by_review_id(
    conn: Connection, review_id: Union[uuid.UUID, str, bytes]
) -> Optional[Review]:
    """
    Get a review by id.

    Returns:
        The review, or None if there is no such row

    Raises:
        InvalidArgumentException: review_id is not a uuid
        StorageException: the query failed or the stored row is invalid
    """
    review_id = validate_uuid(review_id, "review_id")
    result = execute(conn, SELECT_BY_ID, {"review_id": review_id.bytes}, "get_review_by_review_id")
    review = fetch_one(result, _from_row, "get_review_by_review_id")
    log_debug("Review lookup by id", review_id=str(review_id), found=review is not None)
    return review


def get_review_by_reviewer_id(
    conn: Connection, reviewer_id: Union[uuid.UUID, str, bytes]
) -> List[Review]:
    """Get every review written by one reviewer."""
    reviewer_id = validate_uuid(reviewer_id, "review_reviewer_id")
    result = execute(
        conn,
        SELECT_BY_REVIEWER_ID,
        {"review_reviewer_id": reviewer_id.bytes},
        "get_review_by_reviewer_id",
    )
    reviews = fetch_all(result, _from_row, "get_review_by_reviewer_id")
    log_debug("Review lookup by reviewer", reviewer_id=str(reviewer_id), count=len(reviews))
    return reviews


def get_review_by_review_console(conn: Connection, review_console: str) -> List[Review]:
    """Get reviews whose console contains the given text."""
    review_console = validate_text(review_console, "review_console", CONSOLE_MAX_LENGTH)
    result = execute(
        conn,
        SELECT_BY_CONSOLE,
        {"review_console": contains_pattern(review_console)},
        "get_review_by_review_console",
    )
    reviews = fetch_all(result, _from_row, "get_review_by_review_console")
    log_debug("Review search by console", console=review_console, count=len(reviews))
    return reviews


def get_review_by_review_content(conn: Connection, review_content: str) -> List[Review]:
    """Get reviews whose content contains the given text."""
    review_content = validate_text(review_content, "review_content", CONTENT_MAX_LENGTH)
    result = execute(
        conn,
        SELECT_BY_CONTENT,
        {"review_content": contains_pattern(review_content)},
        "get_review_by_review_content",
    )
    reviews = fetch_all(result, _from_row, "get_review_by_review_content")
    log_debug("Review search by content", count=len(reviews))
    return reviews


def get_review_by_review_rating(conn: Connection, review_rating: int) -> List[Review]:
    """Get reviews with exactly this rating."""
    review_rating = validate_int_range(review_rating, "review_rating", RATING_MIN, RATING_MAX)
    result = execute(
        conn,
        SELECT_BY_RATING,
        {"review_rating": review_rating},
        "get_review_by_review_rating",
    )
    reviews = fetch_all(result, _from_row, "get_review_by_review_rating")
    log_debug("Review lookup by rating", rating=review_rating, count=len(reviews))
    return reviews


def get_all_reviews(conn: Connection) -> List[Review]:
    """Get every review, oldest first."""
    result = execute(conn, SELECT_ALL, {}, "get_all_reviews")
    reviews = fetch_all(result, _from_row, "get_all_reviews")
    log_debug("Review listing", count=len(reviews))
    return reviews
