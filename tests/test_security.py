"""
Tests for argon2i hash identification and password hashing.
"""
import pytest

from gamereview.core.exceptions import (
    InvalidArgumentException,
    RangeException,
    TypeMismatchException,
)
from gamereview.core.security import (
    ARGON2I_HASH_LENGTH,
    get_password_hash,
    is_argon2i_hash,
    validate_password_hash,
    verify_password,
)
from gamereview.schemas.reviewer import Reviewer
from tests.conftest import make_argon2i_hash


def test_is_argon2i_hash():
    assert is_argon2i_hash(make_argon2i_hash())
    assert not is_argon2i_hash(make_argon2i_hash().replace("$argon2i$", "$argon2d$"))
    assert not is_argon2i_hash("$2b$12$" + "a" * 53)
    assert not is_argon2i_hash("hunter2")


def test_validate_password_hash_error_kinds():
    assert validate_password_hash("  " + make_argon2i_hash() + "\n") == make_argon2i_hash()

    with pytest.raises(InvalidArgumentException):
        validate_password_hash("")
    with pytest.raises(InvalidArgumentException):
        validate_password_hash("hunter2")
    with pytest.raises(RangeException):
        validate_password_hash(make_argon2i_hash() + "A")
    with pytest.raises(TypeMismatchException):
        validate_password_hash(b"$argon2i$")


def test_generated_hash_is_a_valid_reviewer_hash(reviewer_factory):
    hashed = get_password_hash("correct horse battery staple")

    assert len(hashed) == ARGON2I_HASH_LENGTH
    assert verify_password("correct horse battery staple", hashed)
    assert not verify_password("wrong", hashed)

    reviewer = reviewer_factory(reviewer_hash=hashed)
    assert isinstance(reviewer, Reviewer)
    assert reviewer.reviewer_hash == hashed
