"""
Unit tests for the Review entity.
"""
import uuid
from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from gamereview.core.clock import fixed_clock, utc_now
from gamereview.core.exceptions import (
    InvalidArgumentException,
    RangeException,
    TypeMismatchException,
)
from gamereview.schemas.review import Review
from tests.conftest import FIXED_NOW


def _review(**overrides) -> Review:
    fields = {
        "review_id": uuid.uuid4(),
        "review_reviewer_id": uuid.uuid4(),
        "review_console": "Xbox",
        "review_date": "2024-06-01 10:00:00.000000",
        "review_rating": 8,
        "review_content": "Great game",
    }
    fields.update(overrides)
    return Review(**fields)


def test_valid_review_keeps_normalized_fields():
    review_id = uuid.uuid4()
    reviewer_id = uuid.uuid4()

    review = Review(
        review_id=review_id.bytes,
        review_reviewer_id=str(reviewer_id),
        review_console="  Switch ",
        review_date="2024-06-01 10:00:00.250000",
        review_rating=10,
        review_content="  <p>Best Zelda yet</p> ",
    )

    assert review.review_id == review_id
    assert review.review_reviewer_id == reviewer_id
    assert review.review_console == "Switch"
    assert review.review_date == datetime(2024, 6, 1, 10, 0, 0, 250000)
    assert review.review_rating == 10
    assert review.review_content == "Best Zelda yet"


def test_missing_date_comes_from_injected_clock():
    review = Review.create(
        review_id=uuid.uuid4(),
        review_reviewer_id=uuid.uuid4(),
        review_console="Xbox",
        review_date=None,
        review_rating=8,
        review_content="Great game",
        clock=fixed_clock(FIXED_NOW),
    )

    assert review.review_date == FIXED_NOW


def test_missing_date_defaults_to_now():
    before = utc_now()
    review = _review(review_date=None)
    after = utc_now()

    assert before <= review.review_date <= after


def test_omitted_date_defaults_to_now():
    review = Review(
        review_id=uuid.uuid4(),
        review_reviewer_id=uuid.uuid4(),
        review_console="Xbox",
        review_rating=8,
        review_content="Great game",
    )

    assert abs(review.review_date - utc_now()) < timedelta(seconds=5)


def test_assigning_none_date_resets_to_now():
    review = _review()

    review.review_date = None

    assert abs(review.review_date - utc_now()) < timedelta(seconds=5)


def test_nonexistent_date_is_range():
    with pytest.raises(RangeException):
        _review(review_date="2024-09-31 12:00:00")


def test_unparseable_date_is_invalid_argument():
    with pytest.raises(InvalidArgumentException):
        _review(review_date="last tuesday")


def test_console_too_long_after_trim_is_range():
    with pytest.raises(RangeException):
        _review(review_console="   PlayStation 5 Pro Extra Long Name   ")


def test_empty_console_is_invalid_argument():
    with pytest.raises(InvalidArgumentException):
        _review(review_console="  <b></b> ")


@pytest.mark.parametrize("rating", [0, 5, 10])
def test_rating_bounds_inclusive(rating):
    assert _review(review_rating=rating).review_rating == rating


@pytest.mark.parametrize("rating", [-1, 11, 100])
def test_rating_out_of_bounds_is_range(rating):
    with pytest.raises(RangeException):
        _review(review_rating=rating)


@pytest.mark.parametrize("rating", ["8", 8.0, True, None])
def test_rating_must_be_int(rating):
    with pytest.raises(TypeMismatchException):
        _review(review_rating=rating)


def test_content_length_limit():
    assert len(_review(review_content="x" * 10000).review_content) == 10000

    with pytest.raises(RangeException):
        _review(review_content="x" * 10001)


def test_failed_assignment_leaves_previous_value():
    review = _review()

    with pytest.raises(RangeException):
        review.review_rating = 42
    with pytest.raises(RangeException):
        review.review_console = "x" * 17

    assert review.review_rating == 8
    assert review.review_console == "Xbox"


def test_ids_are_immutable():
    review = _review()

    with pytest.raises(ValidationError):
        review.review_id = uuid.uuid4()
    with pytest.raises(ValidationError):
        review.review_reviewer_id = uuid.uuid4()


def test_construction_stops_at_first_failure():
    with pytest.raises(InvalidArgumentException) as exc_info:
        _review(review_reviewer_id="nope", review_rating=99)

    assert exc_info.value.details["field"] == "review_reviewer_id"


def test_try_create_with_clock_context():
    result = Review.try_create(
        context={"clock": fixed_clock(FIXED_NOW)},
        review_id=uuid.uuid4(),
        review_reviewer_id=uuid.uuid4(),
        review_console="PC",
        review_rating=3,
        review_content="Buggy at launch",
    )

    assert result.ok
    assert result.value.review_date == FIXED_NOW

    failed = Review.try_create(
        review_id=uuid.uuid4(),
        review_reviewer_id=uuid.uuid4(),
        review_console="PC",
        review_rating=-3,
        review_content="Buggy at launch",
    )

    assert not failed.ok
    assert isinstance(failed.error, RangeException)


def test_ampersands_survive_and_count_once():
    review = _review(review_console="PS4 & PS5 Pro", review_content="R&D team did great")

    assert review.review_console == "PS4 & PS5 Pro"
    assert review.review_content == "R&D team did great"
    assert review.revalidated() == review
