"""
Review entity - one critique of a game on a console.
"""
import uuid
from datetime import datetime
from typing import Any, Optional, Union

from pydantic import Field, ValidationInfo, field_validator

from gamereview.core.clock import Clock, utc_now
from gamereview.core.validation import (
    validate_datetime,
    validate_int_range,
    validate_text,
    validate_uuid,
)
from gamereview.schemas.base import EntityModel

CONSOLE_MAX_LENGTH = 16
CONTENT_MAX_LENGTH = 10000
RATING_MIN = 0
RATING_MAX = 10


class Review(EntityModel):
    """
    A single game review written by one Reviewer.

    review_date falls back to the clock in the validation context (see
    Review.create) or to the current UTC time.
    """

    review_id: uuid.UUID = Field(..., frozen=True)
    review_reviewer_id: uuid.UUID = Field(..., frozen=True)
    review_console: str
    review_date: datetime = Field(default=None, validate_default=True)
    review_rating: int
    review_content: str

    @field_validator("review_id", mode="before")
    @classmethod
    def check_review_id(cls, value: Any) -> uuid.UUID:
        return validate_uuid(value, "review_id")

    @field_validator("review_reviewer_id", mode="before")
    @classmethod
    def check_review_reviewer_id(cls, value: Any) -> uuid.UUID:
        return validate_uuid(value, "review_reviewer_id")

    @field_validator("review_console", mode="before")
    @classmethod
    def check_console(cls, value: Any) -> str:
        return validate_text(value, "review_console", CONSOLE_MAX_LENGTH)

    @field_validator("review_date", mode="before")
    @classmethod
    def check_date(cls, value: Any, info: ValidationInfo) -> datetime:
        if value is None:
            clock = (info.context or {}).get("clock") or utc_now
            return clock()
        return validate_datetime(value, "review_date")

    @field_validator("review_rating", mode="before")
    @classmethod
    def check_rating(cls, value: Any) -> int:
        return validate_int_range(value, "review_rating", RATING_MIN, RATING_MAX)

    @field_validator("review_content", mode="before")
    @classmethod
    def check_content(cls, value: Any) -> str:
        return validate_text(value, "review_content", CONTENT_MAX_LENGTH)

    @classmethod
    def create(
        cls,
        review_id: Union[uuid.UUID, str, bytes],
        review_reviewer_id: Union[uuid.UUID, str, bytes],
        review_console: str,
        review_date: Union[datetime, str, None],
        review_rating: int,
        review_content: str,
        clock: Optional[Clock] = None,
    ) -> "Review":
        """Build a review, taking "now" from `clock` when review_date is None."""
        return cls.model_validate(
            {
                "review_id": review_id,
                "review_reviewer_id": review_reviewer_id,
                "review_console": review_console,
                "review_date": review_date,
                "review_rating": review_rating,
                "review_content": review_content,
            },
            context={"clock": clock},
        )

    def __repr__(self):
        return (
            f"<Review(id={self.review_id}, reviewer_id={self.review_reviewer_id}, "
            f"console={self.review_console}, rating={self.review_rating})>"
        )
