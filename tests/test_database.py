"""
Tests for table creation and connection scoping.
"""
from sqlalchemy import inspect

from gamereview.db.database import get_connection


def test_init_db_creates_both_tables(engine):
    inspector = inspect(engine)

    assert set(inspector.get_table_names()) >= {"reviewer", "review"}
    reviewer_columns = {c["name"] for c in inspector.get_columns("reviewer")}
    assert reviewer_columns == {
        "reviewer_id",
        "reviewer_activation_token",
        "reviewer_nick_name",
        "reviewer_email",
        "reviewer_hash",
    }
    review_columns = {c["name"] for c in inspector.get_columns("review")}
    assert review_columns == {
        "review_id",
        "review_reviewer_id",
        "review_console",
        "review_date",
        "review_rating",
        "review_content",
    }


def test_review_references_reviewer(engine):
    foreign_keys = inspect(engine).get_foreign_keys("review")

    assert foreign_keys[0]["referred_table"] == "reviewer"
    assert foreign_keys[0]["constrained_columns"] == ["review_reviewer_id"]


def test_get_connection_yields_open_connection(engine):
    with get_connection(engine) as conn:
        assert not conn.closed
    assert conn.closed
