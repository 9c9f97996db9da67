"""
Password hashing for reviewer accounts.

Hashes are argon2i with m=1024,t=384,p=2 and a 32 byte digest, which renders
to exactly 97 characters.
"""
from typing import Any

from passlib.context import CryptContext

from gamereview.core.exceptions import (
    InvalidArgumentException,
    RangeException,
    TypeMismatchException,
)

ARGON2I_IDENT = "$argon2i$"
ARGON2I_HASH_LENGTH = 97

pwd_context = CryptContext(
    schemes=["argon2"],
    argon2__type="i",
    argon2__memory_cost=1024,
    argon2__rounds=384,
    argon2__parallelism=2,
    argon2__digest_size=32,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def is_argon2i_hash(value: str) -> bool:
    """True when the hash declares itself as argon2i."""
    return pwd_context.identify(value) == "argon2" and value.startswith(ARGON2I_IDENT)


def validate_password_hash(value: Any, field: str = "reviewer_hash") -> str:
    """
    Validate a stored password hash.

    Raises:
        TypeMismatchException: value is not a string
        InvalidArgumentException: empty, or not an argon2i hash
        RangeException: not exactly 97 characters
    """
    label = field.replace("_", " ")
    if not isinstance(value, str):
        raise TypeMismatchException(
            f"{label} must be a string",
            details={"field": field, "type": type(value).__name__},
        )

    hashed = value.strip()
    if not hashed:
        raise InvalidArgumentException(
            f"{label} is empty or insecure", details={"field": field}
        )

    if not is_argon2i_hash(hashed):
        raise InvalidArgumentException(
            f"{label} is not a valid hash", details={"field": field}
        )

    if len(hashed) != ARGON2I_HASH_LENGTH:
        raise RangeException(
            f"{label} must be {ARGON2I_HASH_LENGTH} characters",
            details={"field": field, "length": len(hashed)},
        )

    return hashed
