"""
Repositories package.
Single-statement SQL operations for reviewers and reviews.
"""
from gamereview.repositories.reviewer import (
    insert_reviewer,
    update_reviewer,
    delete_reviewer,
    get_reviewer_by_reviewer_id,
    get_reviewer_by_reviewer_email,
    get_reviewer_by_reviewer_nick_name,
    get_reviewer_by_reviewer_activation_token,
)
from gamereview.repositories.review import (
    insert_review,
    update_review,
    delete_review,
    get_review_by_review_id,
    get_review_by_reviewer_id,
    get_review_by_review_console,
    get_review_by_review_content,
    get_review_by_review_rating,
    get_all_reviews,
)

__all__ = [
    # Reviewer
    "insert_reviewer",
    "update_reviewer",
    "delete_reviewer",
    "get_reviewer_by_reviewer_id",
    "get_reviewer_by_reviewer_email",
    "get_reviewer_by_reviewer_nick_name",
    "get_reviewer_by_reviewer_activation_token",
    # Review
    "insert_review",
    "update_review",
    "delete_review",
    "get_review_by_review_id",
    "get_review_by_reviewer_id",
    "get_review_by_review_console",
    "get_review_by_review_content",
    "get_review_by_review_rating",
    "get_all_reviews",
]
