"""
Shared fixtures: an in-memory SQLite database and entity factories.
"""
import base64
import uuid
from datetime import datetime

import pytest
from sqlalchemy import create_engine

from gamereview.core.clock import fixed_clock
from gamereview.db.database import close_db, get_connection, init_db
from gamereview.schemas.review import Review
from gamereview.schemas.reviewer import Reviewer

FIXED_NOW = datetime(2024, 6, 1, 12, 30, 45, 123456)


def make_argon2i_hash(seed: bytes = b"s") -> str:
    """A well-formed 97 character argon2i hash (m=1024,t=384,p=2, 32 byte digest)."""
    salt = base64.b64encode(seed * 16).decode().rstrip("=")
    digest = base64.b64encode(seed * 32).decode().rstrip("=")
    return f"$argon2i$v=19$m=1024,t=384,p=2${salt}${digest}"


@pytest.fixture
def engine():
    """Fresh in-memory database with both tables created."""
    engine = create_engine("sqlite://", future=True)
    init_db(engine)
    yield engine
    close_db(engine)


@pytest.fixture
def conn(engine):
    with get_connection(engine) as connection:
        yield connection


@pytest.fixture
def reviewer_factory():
    def _make(**overrides) -> Reviewer:
        fields = {
            "reviewer_id": uuid.uuid4(),
            "reviewer_activation_token": None,
            "reviewer_nick_name": "tonyr",
            "reviewer_email": "tony@example.com",
            "reviewer_hash": make_argon2i_hash(),
        }
        fields.update(overrides)
        return Reviewer(**fields)

    return _make


@pytest.fixture
def review_factory():
    def _make(reviewer_id, **overrides) -> Review:
        fields = {
            "review_id": uuid.uuid4(),
            "review_reviewer_id": reviewer_id,
            "review_console": "Xbox",
            "review_date": None,
            "review_rating": 8,
            "review_content": "Great game",
        }
        fields.update(overrides)
        return Review.create(clock=fixed_clock(FIXED_NOW), **fields)

    return _make
