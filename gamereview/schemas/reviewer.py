"""
Reviewer entity - an account that writes reviews.
"""
import uuid
from typing import Any, Optional

from pydantic import Field, field_validator

from gamereview.core.config import settings
from gamereview.core.security import validate_password_hash
from gamereview.core.validation import (
    validate_email_address,
    validate_hex_token,
    validate_text,
    validate_uuid,
)
from gamereview.schemas.base import EntityModel

NICK_NAME_MAX_LENGTH = 32
EMAIL_MAX_LENGTH = 128


class Reviewer(EntityModel):
    """
    Small cross section of a game site reviewer.

    Top level entity: reviews point back to it through review_reviewer_id.
    An activation token is present until the account is activated.

    Raises (construction and assignment):
        InvalidArgumentException: empty, insecure or malformed values
        RangeException: values that do not fit (length, non-hex token)
        TypeMismatchException: values of the wrong type
    """

    reviewer_id: uuid.UUID = Field(..., frozen=True)
    reviewer_activation_token: Optional[str] = None
    reviewer_nick_name: str
    reviewer_email: str
    reviewer_hash: str

    @field_validator("reviewer_id", mode="before")
    @classmethod
    def check_reviewer_id(cls, value: Any) -> uuid.UUID:
        return validate_uuid(value, "reviewer_id")

    @field_validator("reviewer_activation_token", mode="before")
    @classmethod
    def check_activation_token(cls, value: Any) -> Optional[str]:
        # no token means the account is activated
        if value is None:
            return None
        return validate_hex_token(
            value, "reviewer_activation_token", settings.ACTIVATION_TOKEN_LENGTH
        )

    @field_validator("reviewer_nick_name", mode="before")
    @classmethod
    def check_nick_name(cls, value: Any) -> str:
        return validate_text(value, "reviewer_nick_name", NICK_NAME_MAX_LENGTH)

    @field_validator("reviewer_email", mode="before")
    @classmethod
    def check_email(cls, value: Any) -> str:
        return validate_email_address(value, "reviewer_email", EMAIL_MAX_LENGTH)

    @field_validator("reviewer_hash", mode="before")
    @classmethod
    def check_hash(cls, value: Any) -> str:
        return validate_password_hash(value, "reviewer_hash")

    @property
    def is_activated(self) -> bool:
        return self.reviewer_activation_token is None

    def __repr__(self):
        return f"<Reviewer(id={self.reviewer_id}, nick_name={self.reviewer_nick_name})>"
